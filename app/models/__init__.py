"""Domain models for the application"""
from .note import Note, NoteCreate, NoteUpdate, NoteSummary
from .editor_session import EditorSessionStatus

__all__ = [
    'Note', 'NoteCreate', 'NoteUpdate', 'NoteSummary',
    'EditorSessionStatus',
]
