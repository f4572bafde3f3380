"""
mytasks: a single-user task list with local persistence and per-task reminders.

Subpackages:
- core: ports (gateway Protocols) and AppState
- tasks: task models, blob codec, TaskStore and small helpers
- storage: SQLite-backed key-value persistence
- reminders: in-process one-shot reminder scheduler
- connectors / cli: console front-end and composition root
"""

__version__ = "0.1.0"
