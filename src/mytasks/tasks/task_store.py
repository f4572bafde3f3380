# src/mytasks/tasks/task_store.py

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import replace

from ..core.ports import KeyValueStore, ReminderScheduler
from .task_codec import decode_tasks, encode_tasks
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list kept in sync with persistence and reminders.

    The ordered list held here is the source of truth for the session.
    Every persisted mutation encodes a snapshot and hands it to a background
    save (fire-and-forget). Saves are serialized with a FIFO lock, so the
    gateway sees writes in mutation order.

    All gateway failures (load, save, schedule, cancel) are logged and never
    roll back or block the in-memory change.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        reminders: ReminderScheduler,
        *,
        storage_key: str = "tasks",
        reminder_title: str = "Task Reminder",
        reminder_delay_seconds: float = 10.0,
    ) -> None:
        self._kv = kv
        self._reminders = reminders
        self._storage_key = storage_key
        self._reminder_title = reminder_title
        self._reminder_delay = float(reminder_delay_seconds)

        self._tasks: list[Task] = []
        self._edit_buffer = ""

        self._save_lock = asyncio.Lock()
        self._pending_saves: set[asyncio.Task[bool]] = set()

        reminders.add_delivery_listener(self._on_reminder_delivered)

    # ---- read accessors ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def edit_buffer(self) -> str:
        return self._edit_buffer

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def editing_task(self) -> Task | None:
        for t in self._tasks:
            if t.editing:
                return t
        return None

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _new_id(self) -> str:
        existing = {t.id for t in self._tasks}
        while True:
            candidate = uuid.uuid4().hex
            if candidate not in existing:
                return candidate

    def _persist(self) -> None:
        blob = encode_tasks(self._tasks)
        save = asyncio.get_running_loop().create_task(self._save_blob(blob))
        self._pending_saves.add(save)
        save.add_done_callback(self._pending_saves.discard)

    async def _save_blob(self, blob: str) -> bool:
        async with self._save_lock:
            try:
                await self._kv.set(self._storage_key, blob)
            except Exception:
                logger.exception("Failed to save tasks key=%s", self._storage_key)
                return False
        logger.debug("Saved tasks key=%s bytes=%d", self._storage_key, len(blob))
        return True

    async def _schedule_reminder(self, text: str) -> str | None:
        try:
            return await self._reminders.schedule(
                self._reminder_title,
                f"Time to complete: {text}",
                self._reminder_delay,
            )
        except Exception:
            logger.exception("Failed to schedule reminder for new task")
            return None

    async def _cancel_reminder(self, handle: str) -> bool:
        try:
            cancelled = await self._reminders.cancel(handle)
        except Exception:
            logger.exception("Failed to cancel reminder handle=%s", handle)
            return False
        if not cancelled:
            logger.debug("Reminder handle=%s was not pending", handle)
        return cancelled

    def _on_reminder_delivered(self, handle: str) -> None:
        # A fired reminder is no longer outstanding. Handles are not persisted.
        for i, t in enumerate(self._tasks):
            if t.reminder_handle == handle:
                self._tasks[i] = replace(t, reminder_handle=None)
                logger.debug("Reminder delivered for task id=%s", t.id)
                return

    # ---- public API ----

    async def load(self) -> int:
        """
        Replace the current list with what is persisted.

        Fails soft: on read or decode failure the list is left empty.
        """
        self._tasks = []
        self._edit_buffer = ""
        try:
            blob = await self._kv.get(self._storage_key)
        except Exception:
            logger.exception("Failed to read tasks key=%s", self._storage_key)
            return 0

        if not blob:
            logger.info("No stored tasks under key=%s", self._storage_key)
            return 0

        try:
            self._tasks = decode_tasks(blob)
        except Exception:
            logger.exception("Failed to decode stored tasks key=%s", self._storage_key)
            self._tasks = []
            return 0

        logger.info("Loaded %d tasks", len(self._tasks))
        return len(self._tasks)

    async def add(self, text: str) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            return None

        handle = await self._schedule_reminder(clean)
        task = Task(
            id=self._new_id(),
            text=clean,
            completed=False,
            priority=Priority.MEDIUM,
            reminder_handle=handle,
        )
        self._tasks = [*self._tasks, task]
        self._persist()
        logger.debug("Task added id=%s reminder=%s", task.id, handle)
        return task

    def set_editing(self, task_id: str, initial_text: str) -> Task | None:
        """
        Toggle edit mode for one task and turn it off everywhere else.

        Transient UI state: nothing is persisted.
        """
        self._tasks = [
            replace(t, editing=(not t.editing) if t.id == task_id else False)
            for t in self._tasks
        ]
        self._edit_buffer = initial_text
        return self.get(task_id)

    async def commit_edit(self, task_id: str, edited_text: str) -> Task | None:
        clean = (edited_text or "").strip()
        if not clean:
            return None

        idx = self._index_of(task_id)
        if idx is None:
            return None

        updated = replace(self._tasks[idx], text=clean, editing=False)
        self._tasks[idx] = updated
        self._edit_buffer = ""
        self._persist()
        return updated

    async def set_priority(self, task_id: str, priority: Priority | str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None

        updated = replace(self._tasks[idx], priority=Priority(priority))
        self._tasks[idx] = updated
        self._persist()
        return updated

    async def cycle_priority(self, task_id: str) -> Task | None:
        task = self.get(task_id)
        if task is None:
            return None
        return await self.set_priority(task_id, task.priority.next())

    async def toggle_completed(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None

        task = self._tasks[idx]
        completing = not task.completed
        if completing and task.reminder_handle:
            await self._cancel_reminder(task.reminder_handle)

        # The list may have changed while we awaited the gateway.
        idx = self._index_of(task_id)
        if idx is None:
            return None
        current = self._tasks[idx]
        # Completed tasks never keep a reminder, even if cancel failed.
        handle = None if completing else current.reminder_handle
        updated = replace(current, completed=completing, reminder_handle=handle)
        self._tasks[idx] = updated
        self._persist()
        return updated

    async def remove(self, task_id: str) -> bool:
        task = self.get(task_id)
        if task is None:
            return False

        if task.reminder_handle:
            await self._cancel_reminder(task.reminder_handle)

        self._tasks = [t for t in self._tasks if t.id != task_id]
        self._persist()
        logger.debug("Task removed id=%s", task_id)
        return True

    async def flush(self) -> None:
        """Wait for every outstanding save to finish."""
        while self._pending_saves:
            await asyncio.gather(*list(self._pending_saves))
