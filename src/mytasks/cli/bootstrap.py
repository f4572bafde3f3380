# src/mytasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the concrete gateways and the TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import ReminderSink
from ..core.state import AppState
from ..reminders.reminder_scheduler import LocalReminderScheduler
from ..storage.kv_store import SqliteKeyValueStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(sink: ReminderSink, *, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv = SqliteKeyValueStore(settings.store_db_path)
    reminders = LocalReminderScheduler(sink, enabled=settings.notifications_enabled)
    task_store = TaskStore(
        kv,
        reminders,
        storage_key=settings.storage_key,
        reminder_title=settings.reminder_title,
        reminder_delay_seconds=settings.reminder_delay_seconds,
    )
    return AppState(settings=settings, kv=kv, reminders=reminders, task_store=task_store)
