# tests/test_kv_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from mytasks.storage.kv_store import SqliteKeyValueStore


@pytest.mark.asyncio
async def test_get_missing_key_returns_none(tmp_path: Path) -> None:
    kv = SqliteKeyValueStore(tmp_path / "store.sqlite3")
    assert await kv.get("tasks") is None


@pytest.mark.asyncio
async def test_set_overwrites_and_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "store.sqlite3"
    kv = SqliteKeyValueStore(db)

    await kv.set("tasks", "[1]")
    await kv.set("tasks", '[{"text": "чай"}]')
    await kv.set("other", "x")

    reopened = SqliteKeyValueStore(db)
    assert await reopened.get("tasks") == '[{"text": "чай"}]'
    assert await reopened.get("other") == "x"
    assert db.exists()
