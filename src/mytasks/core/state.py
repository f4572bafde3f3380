# src/mytasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import KeyValueStore, ReminderScheduler


@dataclass
class AppState:
    """
    Everything the running app owns, passed explicitly to the front-end.

    settings is duck-typed (real Settings or a SimpleNamespace in tests).
    """

    settings: Any
    kv: KeyValueStore
    reminders: ReminderScheduler
    task_store: TaskStore
