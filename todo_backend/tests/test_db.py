import sqlite3

import pytest

from src.api.db import SAMPLE_TODOS, Database, init_schema, seed_sample_data


async def test_execute_reports_insert_id_and_matched_count(db):
    result = await db.execute(
        "INSERT INTO todos (title, completed, userId) VALUES (?, ?, ?)", ("Read book", 0, 3)
    )
    assert result.last_insert_id == 1
    assert result.matched_count == 1

    missed = await db.execute("DELETE FROM todos WHERE id = ?", (42,))
    assert missed.matched_count == 0


async def test_update_matched_count_excludes_trigger_writes(db):
    await db.execute("INSERT INTO todos (title, userId) VALUES (?, ?)", ("Walk the dog", 2))
    result = await db.execute("UPDATE todos SET completed = ? WHERE id = ?", (1, 1))
    assert result.matched_count == 1


async def test_query_and_query_one(db):
    await db.execute("INSERT INTO todos (title, userId) VALUES (?, ?)", ("Do laundry", 2))

    rows = await db.query("SELECT * FROM todos")
    assert len(rows) == 1
    assert rows[0]["title"] == "Do laundry"
    assert rows[0]["completed"] == 0
    assert rows[0]["createdAt"] is not None
    assert rows[0]["updatedAt"] is not None

    assert await db.query_one("SELECT * FROM todos WHERE id = ?", (99,)) is None


async def test_engine_errors_propagate_unchanged(db):
    await db.execute("INSERT INTO todos (title, userId) VALUES (?, ?)", ("Mow the lawn", 3))
    with pytest.raises(sqlite3.IntegrityError, match="UNIQUE constraint failed: todos.title"):
        await db.execute("INSERT INTO todos (title, userId) VALUES (?, ?)", ("Mow the lawn", 4))

    with pytest.raises(sqlite3.OperationalError):
        await db.query("SELECT * FROM missing_table")


async def test_seed_sample_data_skips_existing_titles(db):
    assert await seed_sample_data(db) == len(SAMPLE_TODOS)
    assert await seed_sample_data(db) == 0
    rows = await db.query("SELECT title FROM todos ORDER BY id")
    assert [r["title"] for r in rows] == [t[0] for t in SAMPLE_TODOS]


async def test_schema_bootstrap_is_idempotent(db):
    await init_schema(db)
    assert await db.query("SELECT * FROM todos") == []


async def test_connection_required_after_close(tmp_path):
    database = Database(str(tmp_path / "data" / "todos.db"))
    await database.connect()
    await init_schema(database)
    await database.close()

    with pytest.raises(RuntimeError, match="not connected"):
        await database.query("SELECT * FROM todos")
