"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_codec.py: persisted blob format (JSON array of task records)
- task_store.py: in-memory TaskStore kept in sync with persistence and reminders
- task_api.py: small high-level helpers used by the rest of the app
"""
