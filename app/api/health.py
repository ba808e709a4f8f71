"""Health check endpoints"""

from fastapi import APIRouter, Depends

from app.api.deps import get_editor_sessions
from app.services.editor.registry import EditorSessionRegistry

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check(sessions: EditorSessionRegistry = Depends(get_editor_sessions)):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "notes-editor-backend",
        "open_sessions": len(sessions),
    }
