import logging
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from typing import List

from app.api.deps import get_note_repository
from app.infra.supabase.repositories.notes import NoteRepository
from app.models.note import Note, NoteSummary
from app.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["notes"])


class NoteListResponse(BaseModel):
    notes: List[NoteSummary]
    count: int


class NoteResponse(BaseModel):
    note: Note


class DeleteResponse(BaseModel):
    success: bool
    message: str


@router.get("", response_model=NoteListResponse)
async def list_notes(note_repo: NoteRepository = Depends(get_note_repository)):
    """List notes for the list view, most recently updated first"""
    service = NoteService(note_repo)
    try:
        notes = await service.list_notes()
    except Exception as e:
        logger.error(f"Error fetching notes: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching notes: {str(e)}")

    return {
        "notes": notes,
        "count": len(notes)
    }


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(note_id: str, note_repo: NoteRepository = Depends(get_note_repository)):
    """Get a single note by ID"""
    service = NoteService(note_repo)
    try:
        note = await service.get_note(note_id)
    except Exception as e:
        logger.error(f"Error fetching note {note_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching note: {str(e)}")

    if not note:
        raise HTTPException(status_code=404, detail="Note not found")

    return {"note": note}


@router.delete("/{note_id}", response_model=DeleteResponse)
async def delete_note(note_id: str, note_repo: NoteRepository = Depends(get_note_repository)):
    """Delete a note"""
    service = NoteService(note_repo)
    try:
        success = await service.delete_note(note_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error deleting note: {str(e)}")

    if not success:
        raise HTTPException(status_code=404, detail="Note not found")

    return {"success": True, "message": "Note deleted successfully"}
