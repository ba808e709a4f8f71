"""Shared FastAPI dependencies"""
from app.infra.supabase.client import get_supabase_client
from app.infra.supabase.repositories.notes import NoteRepository
from app.services.editor.registry import EditorSessionRegistry, editor_sessions


def get_note_repository() -> NoteRepository:
    return NoteRepository(get_supabase_client())


def get_editor_sessions() -> EditorSessionRegistry:
    return editor_sessions
