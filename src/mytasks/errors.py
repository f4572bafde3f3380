# src/mytasks/errors.py

from __future__ import annotations


class MyTasksError(Exception):
    """Base class for mytasks errors."""


class TaskBlobError(MyTasksError):
    """The persisted task blob could not be decoded."""


class ReminderError(MyTasksError):
    """A reminder could not be scheduled (scheduler failure or permission denied)."""
