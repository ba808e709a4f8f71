"""Contract of the embedded rich-text editing surface"""
from typing import Any, Callable, Dict, Protocol

# Notification hooks
UPDATE = "update"
SELECTION_UPDATE = "selection_update"

# Mark carrying character-level style attributes such as fontSize
TEXT_STYLE_MARK = "textStyle"


class EditorSurface(Protocol):
    """
    The subset of a rich-text editor this application relies on.

    The surface owns its document model and toggle semantics; callers only
    issue named commands and read back HTML and mark attributes.
    """

    def run_command(self, name: str, **attrs: Any) -> bool:
        """Run a named command (e.g. "toggle_bold"). Returns False if it did not apply."""
        ...

    def set_mark(self, mark: str, attrs: Dict[str, Any]) -> bool:
        """Set attributes of a mark on the current selection directly."""
        ...

    def get_attributes(self, mark: str) -> Dict[str, Any]:
        """Attributes of the given mark at the current selection."""
        ...

    def get_html(self) -> str:
        ...

    def on(self, event: str, callback: Callable[[], None]) -> None:
        """Register a hook for UPDATE or SELECTION_UPDATE."""
        ...
