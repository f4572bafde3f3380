# tests/test_commands.py

from __future__ import annotations

import pytest

from mytasks.cli.commands import CommandRegistry
from mytasks.connectors.console_connector import dispatch_line
from mytasks.core.state import AppState
from mytasks.tasks.task_models import Priority


@pytest.mark.asyncio
async def test_command_registry_routes_and_keeps_raw_args(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    async def h(state, args):
        seen.append(args)
        return "ok"

    reg.register("a", h, "a", aliases=["alpha"])

    assert await reg.handle(state, "/a  two  words ") == "ok"
    assert await reg.handle(state, "/ALPHA") == "ok"
    assert seen == [["two  words"], []]


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


@pytest.mark.asyncio
async def test_console_intents_drive_the_store(state: AppState) -> None:
    store = state.task_store

    await dispatch_line(state, "Buy milk")
    await dispatch_line(state, "/add Walk dog")
    assert [t.text for t in store.tasks] == ["Buy milk", "Walk dog"]

    reply = await dispatch_line(state, "/done 1")
    assert "[x] Buy milk" in reply

    await dispatch_line(state, "/prio 2")
    assert store.tasks[1].priority is Priority.HIGH
    await dispatch_line(state, "/prio 2 low")
    assert store.tasks[1].priority is Priority.LOW

    reply = await dispatch_line(state, "/edit 2")
    assert "Editing #2: Walk dog" in reply
    assert store.tasks[1].editing is True
    await dispatch_line(state, "/save 2 Walk the dog")
    assert store.tasks[1].text == "Walk the dog"
    assert store.tasks[1].editing is False

    await dispatch_line(state, "/rm 1")
    assert [t.text for t in store.tasks] == ["Walk the dog"]


@pytest.mark.asyncio
async def test_console_rejects_bad_input(state: AppState) -> None:
    assert "Nothing to add" in await dispatch_line(state, "/add    ")
    assert "Missing task number" in await dispatch_line(state, "/done")
    assert "No task number 7" in await dispatch_line(state, "/rm 7")

    await dispatch_line(state, "A")
    assert "Unknown priority" in await dispatch_line(state, "/prio 1 urgent")
    assert "Nothing to save" in await dispatch_line(state, "/save 1   ")
    assert "No tasks yet" not in await dispatch_line(state, "/list")
