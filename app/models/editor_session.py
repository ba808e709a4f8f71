"""Editor session status model"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class EditorSessionStatus(BaseModel):
    """Point-in-time view of an editor session, as reported to the client"""
    session_id: str
    note_id: Optional[str] = None
    persisted: bool = False
    title: str = ""
    content: str = ""
    loading: bool = False
    saving: bool = False
    autosave_pending: bool = False
    last_saved_at: Optional[datetime] = None
    last_error: Optional[str] = None
