"""Editor session endpoints: open, edit, save and close a note editor"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from typing import Optional

from app.api.deps import get_editor_sessions, get_note_repository
from app.infra.supabase.repositories.notes import NoteRepository
from app.models.editor_session import EditorSessionStatus
from app.models.note import Note
from app.services.editor import (
    ContentChanged,
    EditorSessionRegistry,
    NoteNotFoundError,
    NoteSaveError,
    SessionLoadingError,
    SessionNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/editor-sessions", tags=["editor-sessions"])


class OpenSessionRequest(BaseModel):
    note_id: Optional[str] = None


class ContentChangeRequest(BaseModel):
    title: str = ""
    content: str = ""


class SaveResponse(BaseModel):
    note: Note
    redirect_to: str


@router.post("", response_model=EditorSessionStatus, status_code=201)
async def open_session(
    request: OpenSessionRequest,
    note_repo: NoteRepository = Depends(get_note_repository),
    sessions: EditorSessionRegistry = Depends(get_editor_sessions),
):
    """
    Open an editor for a new note (no note_id) or an existing one.

    If the note cannot be fetched the session is returned in loading state.
    """
    if request.note_id is None:
        controller = sessions.open_new(note_repo)
    else:
        try:
            controller = await sessions.open_existing(note_repo, request.note_id)
        except NoteNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    return controller.snapshot()


@router.get("/{session_id}", response_model=EditorSessionStatus)
async def get_session(
    session_id: str,
    sessions: EditorSessionRegistry = Depends(get_editor_sessions),
):
    """Current state and save status of a session"""
    try:
        return sessions.get(session_id).snapshot()
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{session_id}/content", response_model=EditorSessionStatus, status_code=202)
async def change_content(
    session_id: str,
    request: ContentChangeRequest,
    sessions: EditorSessionRegistry = Depends(get_editor_sessions),
):
    """Report the latest title and content; re-arms autosave"""
    try:
        controller = sessions.get(session_id)
        controller.handle_change(ContentChanged(title=request.title, content=request.content))
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SessionLoadingError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return controller.snapshot()


@router.post("/{session_id}/save", response_model=SaveResponse)
async def save_session(
    session_id: str,
    sessions: EditorSessionRegistry = Depends(get_editor_sessions),
):
    """Save now and end the session; on failure the session stays open"""
    try:
        outcome = await sessions.save(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SessionLoadingError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NoteSaveError as e:
        raise HTTPException(status_code=502, detail=f"Error saving note: {str(e)}")

    return {"note": outcome.note, "redirect_to": outcome.redirect_to}


@router.delete("/{session_id}", status_code=204)
async def close_session(
    session_id: str,
    sessions: EditorSessionRegistry = Depends(get_editor_sessions),
):
    """Leave the editor; cancels any scheduled autosave"""
    try:
        sessions.close(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(status_code=204)
