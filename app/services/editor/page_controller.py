"""
Note Page Controller

Owns the editing session of one open note (new or existing): loads it,
applies change events from the editor shell, drives autosave, and performs
the explicit save that ends the editing session.
"""

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Optional

from app import config
from app.infra.supabase.repositories.notes import NoteRepository
from app.models.editor_session import EditorSessionStatus
from app.models.note import Note
from .autosave import AutosaveCoordinator
from .errors import NoteNotFoundError, NoteSaveError, SessionLoadingError
from .identity import Persisted, is_persisted
from .session import EditorSession
from .shell import ContentChanged

logger = logging.getLogger(__name__)

LIST_VIEW_PATH = "/"
DEFAULT_DEBOUNCE_SECONDS = config.AUTOSAVE_DEBOUNCE_MS / 1000


@dataclass(frozen=True)
class SaveOutcome:
    note: Note
    redirect_to: str = LIST_VIEW_PATH


class NotePageController:
    """Controller for the new-note and note-detail pages"""

    def __init__(
        self,
        repository: NoteRepository,
        session: Optional[EditorSession] = None,
        delay_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        session_id: Optional[str] = None,
    ):
        self.session_id = session_id or uuid.uuid4().hex
        self.session = session or EditorSession()
        self._repository = repository
        self.autosave = AutosaveCoordinator(self.session, repository, delay_seconds)
        self.last_active = time.monotonic()

    @classmethod
    def new(
        cls,
        repository: NoteRepository,
        delay_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        session_id: Optional[str] = None,
    ) -> "NotePageController":
        """Start an empty draft."""
        return cls(repository, EditorSession(), delay_seconds, session_id)

    @classmethod
    async def open(
        cls,
        repository: NoteRepository,
        note_id: str,
        delay_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        session_id: Optional[str] = None,
    ) -> "NotePageController":
        """
        Open an existing note.

        A fetch error leaves the session loading; it is not retried.

        Raises:
            NoteNotFoundError: the store has no note with this id
        """
        session = EditorSession(identity=Persisted(note_id), loading=True)
        controller = cls(repository, session, delay_seconds, session_id)
        await controller.load()
        return controller

    async def load(self) -> None:
        note_id = self.session.note_id
        try:
            note = await self._repository.find_by_id(note_id)
        except Exception as e:
            logger.error(f"Error fetching note {note_id}: {e}")
            self.session.last_error = str(e)
            return

        if note is None:
            raise NoteNotFoundError(note_id)

        self.session.seed(note)

    def handle_change(self, event: ContentChanged) -> None:
        """Subscriber for the editor shell's change events."""
        if self.session.loading:
            raise SessionLoadingError("Note is still loading")

        self.touch()
        self.session.apply(event.title, event.content)
        self.autosave.schedule()

    def touch(self) -> None:
        """Mark the session as in use."""
        self.last_active = time.monotonic()

    async def save_now(self) -> SaveOutcome:
        """
        Save immediately, without the blank-note guard.

        On success the page is left for the list view and autosave is shut
        down. On failure the session stays open with its state untouched.

        Raises:
            SessionLoadingError: the note has not loaded
            NoteSaveError: the store rejected the write
        """
        if self.session.loading:
            raise SessionLoadingError("Note is still loading")

        # No autosave may fire while this write runs, and one already
        # running must settle the note's identity first
        had_pending = self.autosave.pending
        self.autosave.cancel()
        await self.autosave.drain()

        try:
            note = await self.session.persist(self._repository)
        except Exception as e:
            logger.error(f"Error saving note {self.session.note_id or '(draft)'}: {e}")
            if had_pending:
                self.autosave.schedule()
            raise NoteSaveError(str(e)) from e

        self.close()
        return SaveOutcome(note=note)

    def close(self) -> None:
        """Tear down: no new autosave may fire after this."""
        self.autosave.close()

    def snapshot(self) -> EditorSessionStatus:
        session = self.session
        return EditorSessionStatus(
            session_id=self.session_id,
            note_id=session.note_id,
            persisted=is_persisted(session.identity),
            title=session.title,
            content=session.content,
            loading=session.loading,
            saving=session.saving,
            autosave_pending=self.autosave.pending,
            last_saved_at=session.last_saved_at,
            last_error=session.last_error,
        )
