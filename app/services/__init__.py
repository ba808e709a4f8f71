"""Services module"""
from app.services.note_service import NoteService, summarize

__all__ = [
    "NoteService",
    "summarize",
]
