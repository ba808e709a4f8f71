"""Notes repository"""
from typing import List, Optional

from supabase import Client  # type: ignore

from app import config
from app.models.note import Note, NoteCreate, NoteUpdate

from .base import BaseRepository


class NoteRepository(BaseRepository[Note, NoteCreate, NoteUpdate]):
    """Repository for notes operations"""

    def __init__(self, client: Client, table_name: Optional[str] = None):
        super().__init__(client, table_name or config.NOTES_TABLE, Note)

    async def find_recent(self) -> List[Note]:
        """Find notes, most recently updated first"""
        return await self.find_all(order_by="updated_at", desc=True)
