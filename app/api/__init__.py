# API module exports
from app.api import editor_sessions, health, notes
from app.api.base import api_router

__all__ = ["editor_sessions", "health", "notes", "api_router"]
