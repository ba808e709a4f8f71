"""Editor session services"""
from .autosave import AutosaveCoordinator, PendingSave
from .errors import (
    EditorSessionError,
    NoteNotFoundError,
    NoteSaveError,
    SessionLoadingError,
    SessionNotFoundError,
)
from .identity import Draft, NoteIdentity, Persisted
from .page_controller import NotePageController, SaveOutcome
from .registry import EditorSessionRegistry, editor_sessions
from .session import EditorSession
from .shell import ContentChanged, EditorShell
from .toolbar import CommandResult, ToolbarAction, ToolbarDispatcher

__all__ = [
    "AutosaveCoordinator",
    "PendingSave",
    "EditorSessionError",
    "NoteNotFoundError",
    "NoteSaveError",
    "SessionLoadingError",
    "SessionNotFoundError",
    "Draft",
    "NoteIdentity",
    "Persisted",
    "NotePageController",
    "SaveOutcome",
    "EditorSessionRegistry",
    "editor_sessions",
    "EditorSession",
    "ContentChanged",
    "EditorShell",
    "CommandResult",
    "ToolbarAction",
    "ToolbarDispatcher",
]
