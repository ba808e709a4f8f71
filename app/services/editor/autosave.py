"""
Autosave Coordinator

Debounces change notifications into a single persist call per quiet period.
Each change cancels the pending save and schedules a fresh one, so at most
one save is ever waiting. A save that has started is never cancelled.
"""

import asyncio
import logging
from typing import Optional, Set

from app.infra.supabase.repositories.notes import NoteRepository
from .session import EditorSession

logger = logging.getLogger(__name__)


class PendingSave:
    """Handle for the one scheduled save of a coordinator"""

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()

    @property
    def cancelled(self) -> bool:
        return self._handle.cancelled()

    @property
    def when(self) -> float:
        """Event loop time at which the save fires"""
        return self._handle.when()


class AutosaveCoordinator:
    """Schedules background saves for one editor session"""

    def __init__(
        self,
        session: EditorSession,
        repository: NoteRepository,
        delay_seconds: float,
    ):
        self._session = session
        self._repository = repository
        self.delay_seconds = delay_seconds
        self._pending: Optional[PendingSave] = None
        self._in_flight: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self) -> None:
        """
        Re-arm the debounce window.

        Must be called from the event loop that will run the save.
        """
        if self._closed:
            logger.debug("Autosave coordinator closed, ignoring change")
            return

        loop = asyncio.get_running_loop()
        self.cancel()
        self._pending = PendingSave(loop.call_later(self.delay_seconds, self._fire))

    def cancel(self) -> None:
        """Drop the scheduled save, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _fire(self) -> None:
        self._pending = None
        task = asyncio.get_running_loop().create_task(self.save())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def save(self) -> bool:
        """
        Persist the latest session values in the background.

        Returns:
            True if a save was written; False if it was skipped or failed
        """
        if self._session.is_blank():
            logger.debug("Skipping autosave of blank note")
            return False

        try:
            await self._session.persist(self._repository)
            return True
        except Exception as e:
            logger.error(f"Autosave failed for note {self._session.note_id or '(draft)'}: {e}")
            return False

    async def drain(self) -> None:
        """Wait for saves that have already started."""
        if self._in_flight:
            await asyncio.gather(*list(self._in_flight))

    def close(self) -> None:
        self._closed = True
        self.cancel()
