"""Persistence identity of the note behind an editor session"""
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Draft:
    """A note that has never been written to the store"""

    @property
    def note_id(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Persisted:
    """A note with a server-assigned id"""
    note_id: str


NoteIdentity = Union[Draft, Persisted]


def is_persisted(identity: NoteIdentity) -> bool:
    return isinstance(identity, Persisted)
