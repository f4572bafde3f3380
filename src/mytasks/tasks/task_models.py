# src/mytasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Priority(StrEnum):
    """
    Task priority.

    Cycling order is fixed: low -> medium -> high -> low.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    def next(self) -> Priority:
        order = list(Priority)
        return order[(order.index(self) + 1) % len(order)]

    @classmethod
    def from_raw(cls, raw: object) -> Priority:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str) or not raw.strip():
            return cls.MEDIUM
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.MEDIUM


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    reminder_handle: str | None = None

    # UI-only; never written to storage.
    editing: bool = False
