# src/mytasks/tasks/task_codec.py

from __future__ import annotations

"""
Persisted blob format.

The whole collection is stored as one JSON array of records:
  {"id", "text", "completed", "priority"}

Reminder handles are not stored: reminders are in-process timers and none
survive a restart, so a stored "reminderHandle" is ignored on load.

There is no version field. Decoding is tolerant per record (bad records are
skipped), but a blob that is not a JSON array at all is rejected.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from ..errors import TaskBlobError
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


def _as_bool(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int | float):
        return raw != 0
    if isinstance(raw, str):
        return raw.strip().lower() in {"true", "1", "yes"}
    return False


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "priority": task.priority.value,
    }


def record_to_task(record: dict[str, Any]) -> Task | None:
    raw_id = record.get("id")
    if raw_id is None or str(raw_id).strip() == "":
        return None

    text = str(record.get("text") or "").strip()
    if not text:
        return None

    return Task(
        id=str(raw_id),
        text=text,
        completed=_as_bool(record.get("completed")),
        priority=Priority.from_raw(record.get("priority")),
    )


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False)


def decode_tasks(blob: str) -> list[Task]:
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise TaskBlobError(f"task blob is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskBlobError(f"task blob must be a JSON array, got {type(data).__name__}")

    out: list[Task] = []
    seen: set[str] = set()
    for idx, raw in enumerate(data):
        if not isinstance(raw, dict):
            logger.warning("Skipping non-object task record at index %d", idx)
            continue
        task = record_to_task(raw)
        if task is None:
            logger.warning("Skipping invalid task record at index %d", idx)
            continue
        if task.id in seen:
            logger.warning("Skipping duplicate task id=%s at index %d", task.id, idx)
            continue
        seen.add(task.id)
        out.append(task)
    return out
