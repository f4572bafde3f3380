# src/mytasks/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .event_loop import BackgroundLoop

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


class ConsoleReminderSink:
    """ReminderSink that prints due reminders to the console."""

    async def deliver(self, *, title: str, body: str) -> None:
        _print_ts(f"[REMINDER] {title}: {body}")


async def dispatch_line(state: AppState, line: str) -> str:
    """One user intent: slash command, or bare text meaning /add."""
    reply = await command_registry.handle(state, line)
    if reply is not None:
        return reply
    return await command_registry.handle(state, f"/add {line}") or ""


def run_console_loop(state: AppState, runner: BackgroundLoop) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            line = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = runner.run(dispatch_line(state, line))
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply, flush=True)

    logger.info("Console connector finished.")
