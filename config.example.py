# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "MYTASKS_APP_NAME": "App display name (default: mytasks).",
    "MYTASKS_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "MYTASKS_DATA_DIR": "Local data directory, also holds mytasks.log (default: .local/mytasks).",
    "MYTASKS_STORE_DB_PATH": "Key-value SQLite path (default: <data_dir>/store.sqlite3).",
    "MYTASKS_STORAGE_KEY": "Key the task list is stored under (default: tasks).",
    # Reminders
    "MYTASKS_REMINDER_DELAY_SECONDS": "Delay before a new task's reminder fires (default: 10).",
    "MYTASKS_REMINDER_TITLE": "Reminder title (default: Task Reminder).",
    "MYTASKS_NOTIFICATIONS_ENABLED": "Grant reminder permission at startup (true/false, default: true).",
}
