# tests/test_task_models.py

from __future__ import annotations

import dataclasses

import pytest

from mytasks.tasks.task_api import cycle_priority_value
from mytasks.tasks.task_models import Priority, Task


def test_priority_cycle_order() -> None:
    assert Priority.LOW.next() is Priority.MEDIUM
    assert Priority.MEDIUM.next() is Priority.HIGH
    assert Priority.HIGH.next() is Priority.LOW


@pytest.mark.parametrize("start", list(Priority))
def test_priority_cycle_returns_after_three_steps(start: Priority) -> None:
    p = start
    for _ in range(3):
        p = cycle_priority_value(p)
    assert p is start


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("low", Priority.LOW),
        (" HIGH ", Priority.HIGH),
        (Priority.HIGH, Priority.HIGH),
        ("urgent", Priority.MEDIUM),
        (None, Priority.MEDIUM),
        (3, Priority.MEDIUM),
    ],
)
def test_priority_from_raw(raw: object, expected: Priority) -> None:
    assert Priority.from_raw(raw) is expected


def test_task_defaults_and_immutability() -> None:
    task = Task(id="1", text="A")
    assert task.completed is False
    assert task.priority is Priority.MEDIUM
    assert task.reminder_handle is None
    assert task.editing is False

    with pytest.raises(dataclasses.FrozenInstanceError):
        task.text = "B"  # type: ignore[misc]
