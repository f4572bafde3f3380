# src/mytasks/reminders/reminder_scheduler.py

from __future__ import annotations

"""
Local reminder scheduler.

Each reminder is one asyncio task that sleeps for a fixed delay and then
hands (title, body) to an injected ReminderSink. Cancelling the handle
cancels the sleeping task. Reminders live only as long as the process.
"""

import asyncio
import logging
import uuid

from ..core.ports import DeliveryListener, ReminderSink
from ..errors import ReminderError

logger = logging.getLogger(__name__)


class LocalReminderScheduler:
    def __init__(self, sink: ReminderSink, *, enabled: bool = True) -> None:
        self._sink = sink
        self._enabled = bool(enabled)
        self._permitted = False
        self._timers: dict[str, asyncio.Task[None]] = {}
        self._listeners: list[DeliveryListener] = []

    async def request_permission(self) -> bool:
        self._permitted = self._enabled
        return self._permitted

    def pending(self) -> list[str]:
        return list(self._timers)

    def add_delivery_listener(self, listener: DeliveryListener) -> None:
        self._listeners.append(listener)

    async def schedule(self, title: str, body: str, delay_seconds: float) -> str:
        if not self._permitted:
            raise ReminderError("reminder permission not granted")

        handle = uuid.uuid4().hex
        delay = max(0.0, float(delay_seconds))
        timer = asyncio.get_running_loop().create_task(self._fire(handle, title, body, delay))
        self._timers[handle] = timer
        logger.debug("Reminder scheduled handle=%s delay=%.1fs", handle, delay)
        return handle

    async def cancel(self, handle: str) -> bool:
        timer = self._timers.pop(handle, None)
        if timer is None or timer.done():
            return False
        timer.cancel()
        logger.debug("Reminder cancelled handle=%s", handle)
        return True

    async def shutdown(self) -> None:
        """Cancel every pending reminder and wait for the timers to unwind."""
        timers = list(self._timers.values())
        self._timers.clear()
        for t in timers:
            t.cancel()
        if timers:
            await asyncio.gather(*timers, return_exceptions=True)
        logger.info("Reminder scheduler stopped (cancelled=%d)", len(timers))

    async def _fire(self, handle: str, title: str, body: str, delay: float) -> None:
        await asyncio.sleep(delay)
        # Delivered reminders are no longer cancellable.
        self._timers.pop(handle, None)
        try:
            await self._sink.deliver(title=title, body=body)
            logger.info("Reminder delivered handle=%s", handle)
        except Exception:
            logger.exception("Reminder delivery failed handle=%s", handle)

        for listener in list(self._listeners):
            try:
                listener(handle)
            except Exception:
                logger.exception("Reminder delivery listener failed handle=%s", handle)
