# src/mytasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, starts the background event loop,
loads tasks and runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleReminderSink, run_console_loop
from ..connectors.event_loop import BackgroundLoop, start_background_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.task_api import ensure_reminder_permission
from .bootstrap import create_initial_state
from .commands import render_tasks

logger = logging.getLogger(__name__)


async def _startup(state: AppState) -> str | None:
    await state.task_store.load()
    return await ensure_reminder_permission(state)


async def _shutdown_async(state: AppState) -> None:
    await state.task_store.flush()
    shutdown = getattr(state.reminders, "shutdown", None)
    if shutdown is not None:
        await shutdown()


def _shutdown(state: AppState, runner: BackgroundLoop) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        runner.run(_shutdown_async(state), timeout=10.0)
    except Exception:
        logger.exception("Failed to flush pending saves on shutdown.")

    runner.stop()
    runner.join(timeout=5.0)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(ConsoleReminderSink(), settings=settings)
    runner = start_background_loop()

    try:
        warning = runner.run(_startup(state))
        if warning:
            # Shown once; adding tasks still works without reminders.
            print(warning, flush=True)
        print(render_tasks(state), flush=True)

        run_console_loop(state, runner)
    finally:
        _shutdown(state, runner)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
