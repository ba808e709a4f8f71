"""Editor Session Registry - tracks the open editing sessions of this process."""
import logging
import time
from typing import Dict, List

from app import config
from app.infra.supabase.repositories.notes import NoteRepository
from .errors import SessionNotFoundError
from .page_controller import DEFAULT_DEBOUNCE_SECONDS, NotePageController, SaveOutcome

logger = logging.getLogger(__name__)


class EditorSessionRegistry:
    """
    Maps session ids to their page controllers.

    Sessions untouched for longer than idle_seconds are closed whenever
    another session is opened.
    """

    def __init__(
        self,
        delay_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        idle_seconds: float = config.EDITOR_SESSION_IDLE_SECONDS,
    ):
        self.delay_seconds = delay_seconds
        self.idle_seconds = idle_seconds
        self._controllers: Dict[str, NotePageController] = {}

    def open_new(self, repository: NoteRepository) -> NotePageController:
        self.sweep_idle()
        controller = NotePageController.new(repository, self.delay_seconds)
        self._controllers[controller.session_id] = controller
        logger.info(f"Editor session opened: {controller.session_id} (new note)")
        return controller

    async def open_existing(self, repository: NoteRepository, note_id: str) -> NotePageController:
        self.sweep_idle()
        controller = await NotePageController.open(repository, note_id, self.delay_seconds)
        self._controllers[controller.session_id] = controller
        logger.info(f"Editor session opened: {controller.session_id} (note {note_id})")
        return controller

    def get(self, session_id: str) -> NotePageController:
        controller = self._controllers.get(session_id)
        if controller is None:
            raise SessionNotFoundError(session_id)
        controller.touch()
        return controller

    async def save(self, session_id: str) -> SaveOutcome:
        """Manual save; a successful save ends the session."""
        controller = self.get(session_id)
        outcome = await controller.save_now()
        self._controllers.pop(session_id, None)
        logger.info(f"Editor session saved and closed: {session_id}")
        return outcome

    def close(self, session_id: str) -> None:
        controller = self._controllers.pop(session_id, None)
        if controller is None:
            raise SessionNotFoundError(session_id)
        controller.close()
        logger.info(f"Editor session closed: {session_id}")

    def sweep_idle(self) -> List[str]:
        """
        Close sessions idle for longer than idle_seconds.

        Sessions with a save in progress are left alone.

        Returns:
            Ids of the sessions that were closed
        """
        cutoff = time.monotonic() - self.idle_seconds
        expired = [
            session_id
            for session_id, controller in self._controllers.items()
            if controller.last_active < cutoff and not controller.session.saving
        ]
        for session_id in expired:
            controller = self._controllers.pop(session_id)
            controller.close()
            logger.info(f"Editor session expired after inactivity: {session_id}")
        return expired

    async def close_all(self) -> None:
        """Close every session and wait for saves already running."""
        controllers: List[NotePageController] = list(self._controllers.values())
        self._controllers.clear()
        for controller in controllers:
            controller.close()
        for controller in controllers:
            await controller.autosave.drain()

    def __len__(self) -> int:
        return len(self._controllers)


# Global singleton
editor_sessions = EditorSessionRegistry()
