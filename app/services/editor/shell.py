"""
Editor Shell

Hosts an editing surface and a title field, and turns the surface's update
hooks into a single ContentChanged snapshot for one subscriber.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from app import config
from .surface import EditorSurface, SELECTION_UPDATE, UPDATE
from .toolbar import CommandResult, ToolbarAction, ToolbarDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentChanged:
    """Latest title and HTML content of the editor"""
    title: str
    content: str


class EditorShell:
    """Reports edits upward; never writes session state itself."""

    def __init__(
        self,
        surface: EditorSurface,
        on_change: Callable[[ContentChanged], None],
        title: str = "",
        default_font_size: str = config.DEFAULT_FONT_SIZE,
    ):
        self._surface = surface
        self._on_change = on_change
        self.title = title
        self.toolbar = ToolbarDispatcher(surface, default_font_size)
        self.current_font_size = self.toolbar.current_font_size()

        surface.on(UPDATE, self._handle_update)
        surface.on(SELECTION_UPDATE, self._handle_selection_update)

    def snapshot(self) -> ContentChanged:
        return ContentChanged(title=self.title, content=self._surface.get_html())

    def set_title(self, title: str) -> None:
        self.title = title
        self._emit()

    def run(self, action: ToolbarAction, value: Optional[str] = None) -> CommandResult:
        """Dispatch a toolbar action; content changes arrive via the update hook."""
        result = self.toolbar.dispatch(action, value)
        self.current_font_size = self.toolbar.current_font_size()
        return result

    def _handle_update(self) -> None:
        self._emit()

    def _handle_selection_update(self) -> None:
        self.current_font_size = self.toolbar.current_font_size()

    def _emit(self) -> None:
        self._on_change(self.snapshot())
