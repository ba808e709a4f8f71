"""Repository exports"""
from .base import BaseRepository
from .notes import NoteRepository

__all__ = [
    'BaseRepository',
    'NoteRepository',
]
