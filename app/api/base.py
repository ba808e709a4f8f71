from fastapi import APIRouter
from app.api import editor_sessions, health, notes

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(notes.router)
api_router.include_router(editor_sessions.router)
api_router.include_router(health.router)
