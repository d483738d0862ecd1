"""Cancellable fixed-interval autosave task.

Framework independent: wraps one asyncio.Task per editing session. A tick
saves only when there are unsaved edits and no manual save or submit holds
the session lock.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from goldworks.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DEFAULT_INTERVAL_SECONDS = 120.0


def _current_task() -> asyncio.Task | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class AutosaveTask:
    """Recurring draft save for one work session.

    schedule() is idempotent: calling it while a task is pending does not
    restart the interval. The loop ends once a tick finds nothing to save;
    the next edit schedules it again.
    """

    def __init__(
        self,
        save: Callable[[], Awaitable[object]],
        is_dirty: Callable[[], bool],
        lock: asyncio.Lock,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        on_error: Callable[[Exception], Awaitable[None]] | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("Autosave interval must be positive")
        self._save = save
        self._is_dirty = is_dirty
        self._lock = lock
        self._interval = interval_seconds
        self._on_error = on_error
        self._task: asyncio.Task | None = None
        self._running: asyncio.Task | None = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def is_scheduled(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self) -> None:
        """Start the interval timer if it is not already running."""
        if self.is_scheduled:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Autosave scheduled every %ss", self._interval)

    def cancel(self) -> None:
        """Stop the timer and any tick still writing. Safe to call from inside a tick."""
        task, self._task = self._task, None
        current = _current_task()
        stopped = False
        for pending in (task, self._running):
            if pending is None or pending.done() or pending is current:
                continue
            pending.cancel()
            stopped = True
        if stopped:
            logger.debug("Autosave cancelled")

    async def fire_now(self) -> bool:
        """Run one tick immediately. Returns True when a save happened."""
        if not self._is_dirty():
            logger.debug("Autosave skipped: no unsaved changes")
            return False
        if self._lock.locked():
            logger.debug("Autosave skipped: save or submit in progress")
            return False
        await self._save()
        return True

    async def _run(self) -> None:
        me = _current_task()
        while True:
            await asyncio.sleep(self._interval)
            self._running = me
            try:
                await self.fire_now()
            except Exception as exc:
                logger.exception("Autosave failed; unsaved changes kept")
                if self._on_error is not None:
                    await self._on_error(exc)
            finally:
                if self._running is me:
                    self._running = None
            if self._task is not me or not self._is_dirty():
                break
        if self._task is me:
            self._task = None
