"""Editor session exceptions"""


class EditorSessionError(Exception):
    """Base class for editor session failures"""


class SessionNotFoundError(EditorSessionError):
    def __init__(self, session_id: str):
        super().__init__(f"Editor session {session_id} not found")
        self.session_id = session_id


class NoteNotFoundError(EditorSessionError):
    def __init__(self, note_id: str):
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id


class SessionLoadingError(EditorSessionError):
    """Raised when a session is edited or saved before its note has loaded"""


class NoteSaveError(EditorSessionError):
    """
    A foreground save failed.

    The message is the raw store error text so it can be shown to the user.
    """
