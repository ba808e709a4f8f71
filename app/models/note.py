"""Note domain model"""
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator

UNTITLED = "Untitled"


class NoteBase(BaseModel):
    """Base note fields"""
    title: str
    content: str = ""


class NoteCreate(NoteBase):
    """Note creation model"""
    pass


class NoteUpdate(BaseModel):
    """Note update model - all fields optional"""
    title: Optional[str] = None
    content: Optional[str] = None


class Note(NoteBase):
    """Complete note model from database"""
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        # The table may key rows by uuid or bigint; ids stay opaque either way
        return str(value)

    @field_validator("title", "content", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class NoteSummary(BaseModel):
    """List-view projection of a note"""
    id: str
    title: str
    preview: str
    updated_at: Optional[datetime] = None
