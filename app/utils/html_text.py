"""Plain-text helpers for editor HTML"""
import html
import re

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")

PREVIEW_LENGTH = 150


def html_to_text(content: str) -> str:
    """
    Strip tags from editor HTML and collapse whitespace.

    Args:
        content: HTML produced by the editing surface

    Returns:
        str: the visible text, entities unescaped
    """
    if not content:
        return ""
    text = html.unescape(_TAG_RE.sub("", content))
    return _WHITESPACE_RE.sub(" ", text).strip()


def is_blank_html(content: str) -> bool:
    """True when the HTML carries no visible text (e.g. an empty paragraph)."""
    return html_to_text(content) == ""


def make_preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    text = html_to_text(content)
    if len(text) > length:
        return text[:length].rstrip() + "..."
    return text
