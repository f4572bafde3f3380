# src/mytasks/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import Priority

logger = logging.getLogger(__name__)

PERMISSION_WARNING = "Permission required: Please enable notifications for task reminders"


def cycle_priority_value(priority: Priority | str) -> Priority:
    """low -> medium -> high -> low."""
    return Priority(priority).next()


async def ensure_reminder_permission(state: AppState) -> str | None:
    """
    Ask for reminder permission once at startup.

    Returns a user-facing warning when permission is missing, else None.
    Task creation works either way; tasks just get no reminder handle.
    """
    try:
        granted = await state.reminders.request_permission()
    except Exception:
        logger.exception("Reminder permission request failed")
        granted = False

    if granted:
        logger.info("Reminder permission granted")
        return None

    logger.warning("Reminder permission not granted; tasks will have no reminders")
    return PERMISSION_WARNING
