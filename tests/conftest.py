# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from mytasks.core.state import AppState
from mytasks.tasks.task_store import TaskStore

from .fakes import FakeKeyValueStore, FakeReminderScheduler


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="mytasks-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        store_db_path=tmp_path / "store.sqlite3",
        storage_key="tasks",
        reminder_delay_seconds=10.0,
        reminder_title="Task Reminder",
        notifications_enabled=True,
    )


@pytest.fixture()
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def reminders() -> FakeReminderScheduler:
    return FakeReminderScheduler()


@pytest.fixture()
def store(kv: FakeKeyValueStore, reminders: FakeReminderScheduler) -> TaskStore:
    return TaskStore(kv, reminders, storage_key="tasks", reminder_delay_seconds=10.0)


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    kv: FakeKeyValueStore,
    reminders: FakeReminderScheduler,
    store: TaskStore,
) -> AppState:
    """AppState wired with in-memory fakes (no SQLite, no timers)."""
    return AppState(settings=settings, kv=kv, reminders=reminders, task_store=store)
