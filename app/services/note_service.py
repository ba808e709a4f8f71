"""
Note Service

Business logic behind the list view: listing notes as previews,
fetching a single note and deleting notes.
"""

import logging
from typing import List, Optional

from app.infra.supabase.repositories.notes import NoteRepository
from app.models.note import Note, NoteSummary, UNTITLED
from app.utils.html_text import make_preview

logger = logging.getLogger(__name__)

NO_CONTENT = "No content"


def summarize(note: Note) -> NoteSummary:
    """Build the list-view card for a note."""
    return NoteSummary(
        id=note.id,
        title=note.title.strip() or UNTITLED,
        preview=make_preview(note.content) or NO_CONTENT,
        updated_at=note.updated_at,
    )


class NoteService:
    """Service for the notes list view"""

    def __init__(self, note_repo: NoteRepository):
        self.note_repo = note_repo

    async def list_notes(self) -> List[NoteSummary]:
        notes = await self.note_repo.find_recent()
        return [summarize(note) for note in notes]

    async def get_note(self, note_id: str) -> Optional[Note]:
        return await self.note_repo.find_by_id(note_id)

    async def delete_note(self, note_id: str) -> bool:
        """
        Delete a note.

        Returns:
            True if a row was deleted, False if none matched
        """
        deleted = await self.note_repo.delete(note_id)
        if deleted:
            logger.info(f"Deleted note {note_id}")
        return deleted
