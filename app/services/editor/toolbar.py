"""Toolbar Dispatcher - maps toolbar actions onto editing surface commands."""
import logging
import re
from enum import Enum
from typing import Dict, Any, Optional, Tuple

from pydantic import BaseModel

from app import config
from .surface import EditorSurface, TEXT_STYLE_MARK

logger = logging.getLogger(__name__)

FONT_SIZE_OPTIONS = ("12px", "14px", "16px", "18px", "24px", "30px", "36px")
MIN_FONT_SIZE = 1

_FONT_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:px)?\s*$", re.IGNORECASE)


class ToolbarAction(str, Enum):
    """Toolbar buttons"""
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE = "strike"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    BULLET_LIST = "bullet_list"
    ORDERED_LIST = "ordered_list"
    HIGHLIGHT = "highlight"
    HEADING = "heading"
    LINK = "link"
    FONT_SIZE = "font_size"
    FONT_SIZE_INCREASE = "font_size_increase"
    FONT_SIZE_DECREASE = "font_size_decrease"
    CLEAR_MARKS = "clear_marks"
    UNDO = "undo"
    REDO = "redo"


# Actions that are a single surface command with fixed arguments
_SURFACE_COMMANDS: Dict[ToolbarAction, Tuple[str, Dict[str, Any]]] = {
    ToolbarAction.BOLD: ("toggle_bold", {}),
    ToolbarAction.ITALIC: ("toggle_italic", {}),
    ToolbarAction.UNDERLINE: ("toggle_underline", {}),
    ToolbarAction.STRIKE: ("toggle_strike", {}),
    ToolbarAction.CODE_BLOCK: ("toggle_code_block", {}),
    ToolbarAction.BLOCKQUOTE: ("toggle_blockquote", {}),
    ToolbarAction.BULLET_LIST: ("toggle_bullet_list", {}),
    ToolbarAction.ORDERED_LIST: ("toggle_ordered_list", {}),
    ToolbarAction.HIGHLIGHT: ("toggle_highlight", {}),
    ToolbarAction.HEADING: ("toggle_heading", {"level": 2}),
    ToolbarAction.CLEAR_MARKS: ("unset_all_marks", {}),
    ToolbarAction.UNDO: ("undo", {}),
    ToolbarAction.REDO: ("redo", {}),
}


class CommandResult(BaseModel):
    """Outcome of one toolbar action"""
    action: str
    success: bool
    error: Optional[str] = None
    used_fallback: bool = False
    value: Optional[str] = None


def parse_font_size(value: Optional[str]) -> Optional[int]:
    """Pixel magnitude of a CSS size such as "12px", or None if unparsable."""
    if not value:
        return None
    match = _FONT_SIZE_RE.match(str(value))
    if not match:
        return None
    return int(float(match.group(1)))


def step_font_size(current: Optional[str], delta: int, default: str = config.DEFAULT_FONT_SIZE) -> str:
    """
    Shift a font size by delta pixels.

    Falls back to the default size when current is missing or unparsable,
    and never goes below MIN_FONT_SIZE.
    """
    size = parse_font_size(current)
    if size is None:
        size = parse_font_size(default) or 16
    return f"{max(MIN_FONT_SIZE, size + delta)}px"


class ToolbarDispatcher:
    """Issues toolbar actions against an editing surface. Never raises."""

    def __init__(self, surface: EditorSurface, default_font_size: str = config.DEFAULT_FONT_SIZE):
        self._surface = surface
        self.default_font_size = default_font_size

    def current_font_size(self) -> str:
        """Font size at the selection, or the default when none is set."""
        try:
            attrs = self._surface.get_attributes(TEXT_STYLE_MARK) or {}
        except Exception as e:
            logger.warning(f"Could not read {TEXT_STYLE_MARK} attributes: {e}")
            return self.default_font_size
        return attrs.get("fontSize") or self.default_font_size

    def dispatch(self, action: ToolbarAction, value: Optional[str] = None) -> CommandResult:
        try:
            return self._dispatch(ToolbarAction(action), value)
        except Exception as e:
            logger.error(f"Toolbar action failed: {action}, error={e}")
            return CommandResult(action=getattr(action, "value", str(action)), success=False, error=str(e))

    def _dispatch(self, action: ToolbarAction, value: Optional[str]) -> CommandResult:
        if action in _SURFACE_COMMANDS:
            name, attrs = _SURFACE_COMMANDS[action]
            return CommandResult(action=action.value, success=self._surface.run_command(name, **attrs))

        if action == ToolbarAction.LINK:
            if not value:
                return CommandResult(action=action.value, success=False, error="URL is required")
            ok = self._surface.run_command("set_link", href=value)
            return CommandResult(action=action.value, success=ok, value=value)

        if action == ToolbarAction.FONT_SIZE:
            if value and parse_font_size(value) is None:
                return CommandResult(action=action.value, success=False, error=f"Invalid font size: {value}")
            return self._apply_font_size(action, value or None)

        if action in (ToolbarAction.FONT_SIZE_INCREASE, ToolbarAction.FONT_SIZE_DECREASE):
            delta = 1 if action == ToolbarAction.FONT_SIZE_INCREASE else -1
            size = step_font_size(self.current_font_size(), delta, self.default_font_size)
            return self._apply_font_size(action, size)

        return CommandResult(action=action.value, success=False, error=f"Unsupported action: {action}")

    def _apply_font_size(self, action: ToolbarAction, size: Optional[str]) -> CommandResult:
        # None clears the size back to the surface default
        if size is None:
            name, attrs = "unset_font_size", {}
        else:
            name, attrs = "set_font_size", {"size": size}

        try:
            if self._surface.run_command(name, **attrs):
                return CommandResult(action=action.value, success=True, value=size)
            logger.debug(f"{name} did not apply, setting {TEXT_STYLE_MARK} mark directly")
        except Exception as e:
            logger.warning(f"{name} failed, setting {TEXT_STYLE_MARK} mark directly: {e}")

        ok = self._surface.set_mark(TEXT_STYLE_MARK, {"fontSize": size})
        return CommandResult(action=action.value, success=ok, used_fallback=True, value=size)
