"""
Editor Session State

The in-memory (title, content) pair behind one open note, plus its
persistence identity and save status. Exactly one page controller owns a
session; the editor shell only reports changes into it.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from app.infra.supabase.repositories.notes import NoteRepository
from app.models.note import Note, NoteCreate, NoteUpdate, UNTITLED
from app.utils.html_text import is_blank_html
from .errors import NoteNotFoundError
from .identity import Draft, NoteIdentity, Persisted

logger = logging.getLogger(__name__)


class EditorSession:
    """Transient editing state for a single note"""

    def __init__(
        self,
        identity: Optional[NoteIdentity] = None,
        title: str = "",
        content: str = "",
        loading: bool = False,
    ):
        self.identity: NoteIdentity = identity or Draft()
        self.title = title
        self.content = content
        self.loading = loading
        self.saving = False
        self.last_saved_at: Optional[datetime] = None
        self.last_error: Optional[str] = None

    @property
    def note_id(self) -> Optional[str]:
        return self.identity.note_id

    def apply(self, title: str, content: str) -> None:
        self.title = title
        self.content = content

    def seed(self, note: Note) -> None:
        """Load a fetched note into the session and mark it loaded."""
        self.identity = Persisted(note.id)
        self.title = note.title
        self.content = note.content
        self.loading = False

    def is_blank(self) -> bool:
        return not self.title.strip() and is_blank_html(self.content)

    async def persist(self, repository: NoteRepository) -> Note:
        """
        Write the current values to the store.

        Drafts are inserted and the assigned id is captured so every later
        call updates the same row. The saving flag is held for the duration
        of the call and always released.

        Args:
            repository: Note store

        Returns:
            The stored note

        Raises:
            NoteNotFoundError: the persisted row no longer exists
            Exception: any store error, unchanged
        """
        title, content = self.title, self.content
        self.saving = True
        try:
            if isinstance(self.identity, Persisted):
                note_id = self.identity.note_id
                note = await repository.update(note_id, NoteUpdate(title=title, content=content))
                if note is None:
                    raise NoteNotFoundError(note_id)
                logger.info(f"Updated note {note_id}")
            else:
                note = await repository.create(NoteCreate(title=title or UNTITLED, content=content))
                self.identity = Persisted(note.id)
                logger.info(f"Created note {note.id}")

            self.last_saved_at = datetime.now(timezone.utc)
            self.last_error = None
            return note
        except Exception as e:
            self.last_error = str(e)
            raise
        finally:
            self.saving = False
