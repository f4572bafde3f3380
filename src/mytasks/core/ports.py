# src/mytasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskStore depends on these Protocols instead of concrete implementations,
so persistence and reminder delivery stay swappable and easy to fake in tests.
"""

from collections.abc import Callable
from typing import Protocol

DeliveryListener = Callable[[str], None]


class KeyValueStore(Protocol):
    """
    Persistence gateway: whole-blob reads and writes under a fixed key.

    get() returns None when nothing was stored yet (first run).
    set() overwrites unconditionally (last write wins).
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, blob: str) -> None: ...


class ReminderScheduler(Protocol):
    """
    Reminder gateway: one-shot, fixed-delay local notifications.

    schedule() returns an opaque handle or raises ReminderError.
    cancel() is best-effort and reports whether a pending reminder was removed.
    Delivery listeners get the handle once its reminder has fired.
    """

    async def request_permission(self) -> bool: ...

    async def schedule(self, title: str, body: str, delay_seconds: float) -> str: ...

    async def cancel(self, handle: str) -> bool: ...

    def add_delivery_listener(self, listener: DeliveryListener) -> None: ...


class ReminderSink(Protocol):
    """Where a due reminder ends up (console, log, desktop notifier...)."""

    async def deliver(self, *, title: str, body: str) -> None: ...
