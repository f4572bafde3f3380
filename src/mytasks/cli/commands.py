# src/mytasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.state import AppState
from ..tasks.task_models import Priority, Task

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console front-end (/add, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        # Keep the raw remainder so task text keeps its inner spacing.
        rest = line[1:].strip()[len(parts[0]) :].strip()
        args = [rest] if rest else []

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command: /%s", name)
            return f"Unknown command: /{name}. Use /help to list available commands."

        return await handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def render_task(pos: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    line = f"{pos:>2}. [{mark}] {task.text}  ({task.priority.value})"
    if task.reminder_handle:
        line += "  [reminder]"
    if task.editing:
        line += "  <editing>"
    return line


def render_tasks(state: AppState) -> str:
    tasks = state.task_store.tasks
    if not tasks:
        return "No tasks yet. Add one with /add <text>."
    return "\n".join(render_task(i, t) for i, t in enumerate(tasks, start=1))


def _split_pos(args: list[str]) -> tuple[str, str]:
    if not args:
        return "", ""
    head, _, tail = args[0].partition(" ")
    return head, tail.strip()


def _resolve(state: AppState, raw_pos: str) -> Task | None:
    try:
        pos = int(raw_pos)
    except ValueError:
        return None
    tasks = state.task_store.tasks
    if pos < 1 or pos > len(tasks):
        return None
    return tasks[pos - 1]


def _bad_position(raw_pos: str) -> str:
    if not raw_pos:
        return "Missing task number. Use /list to see numbers."
    return f"No task number {raw_pos}. Use /list to see numbers."


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state)


async def cmd_add(state: AppState, args: list[str]) -> str:
    task = await state.task_store.add(args[0] if args else "")
    if task is None:
        return "Nothing to add (empty text)."
    return render_tasks(state)


async def cmd_done(state: AppState, args: list[str]) -> str:
    raw_pos, _ = _split_pos(args)
    task = _resolve(state, raw_pos)
    if task is None:
        return _bad_position(raw_pos)
    await state.task_store.toggle_completed(task.id)
    return render_tasks(state)


async def cmd_prio(state: AppState, args: list[str]) -> str:
    """
    /prio <n>          -> cycle low -> medium -> high -> low
    /prio <n> <level>  -> set explicitly
    """
    raw_pos, level = _split_pos(args)
    task = _resolve(state, raw_pos)
    if task is None:
        return _bad_position(raw_pos)

    if not level:
        await state.task_store.cycle_priority(task.id)
        return render_tasks(state)

    try:
        priority = Priority(level.lower())
    except ValueError:
        return f"Unknown priority: {level}. Use low, medium or high."
    await state.task_store.set_priority(task.id, priority)
    return render_tasks(state)


async def cmd_edit(state: AppState, args: list[str]) -> str:
    raw_pos, _ = _split_pos(args)
    task = _resolve(state, raw_pos)
    if task is None:
        return _bad_position(raw_pos)

    updated = state.task_store.set_editing(task.id, task.text)
    if updated is not None and updated.editing:
        return f"Editing #{raw_pos}: {state.task_store.edit_buffer}\nUse /save {raw_pos} <new text>."
    return f"Stopped editing #{raw_pos}."


async def cmd_save(state: AppState, args: list[str]) -> str:
    raw_pos, text = _split_pos(args)
    task = _resolve(state, raw_pos)
    if task is None:
        return _bad_position(raw_pos)

    updated = await state.task_store.commit_edit(task.id, text)
    if updated is None:
        return "Nothing to save (empty text)."
    return render_tasks(state)


async def cmd_rm(state: AppState, args: list[str]) -> str:
    raw_pos, _ = _split_pos(args)
    task = _resolve(state, raw_pos)
    if task is None:
        return _bad_position(raw_pos)
    await state.task_store.remove(task.id)
    return render_tasks(state)


registry.register("help", cmd_help, "show this help")
registry.register("list", cmd_list, "show all tasks", aliases=["ls"])
registry.register("add", cmd_add, "add a task: /add <text> (bare text works too)")
registry.register("done", cmd_done, "toggle completed: /done <n>", aliases=["toggle"])
registry.register("prio", cmd_prio, "cycle priority or set it: /prio <n> [low|medium|high]")
registry.register("edit", cmd_edit, "toggle edit mode: /edit <n>")
registry.register("save", cmd_save, "commit an edit: /save <n> <text>")
registry.register("rm", cmd_rm, "delete a task: /rm <n>", aliases=["delete", "del"])
