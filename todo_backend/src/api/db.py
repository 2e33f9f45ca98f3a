from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import aiosqlite

logger = logging.getLogger(__name__)

Params = Sequence[Any]

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT UNIQUE NOT NULL,
    completed BOOLEAN NOT NULL DEFAULT 0,
    userId INTEGER NOT NULL,
    createdAt TEXT DEFAULT CURRENT_TIMESTAMP,
    updatedAt TEXT DEFAULT CURRENT_TIMESTAMP
);

CREATE TRIGGER IF NOT EXISTS update_todo
AFTER UPDATE ON todos
BEGIN
    UPDATE todos SET updatedAt = CURRENT_TIMESTAMP WHERE id = OLD.id;
END;
"""

SAMPLE_TODOS = [
    ("Buy groceries", 0, 1),
    ("Walk the dog", 0, 1),
    ("Do laundry", 0, 2),
    ("Wash the car", 0, 2),
    ("Water the plants", 0, 3),
    ("Mow the lawn", 0, 3),
    ("Take out the trash", 0, 4),
    ("Vacuum the house", 0, 4),
    ("Pick up Johnny from school", 0, 5),
    ("Drop off dry cleaning", 0, 5),
]


@dataclass(frozen=True)
class ExecuteResult:
    """
    Outcome of a write statement.

    - last_insert_id: rowid of the most recent INSERT on the connection
    - matched_count: rows changed by the statement itself (trigger writes excluded)
    """
    last_insert_id: Optional[int]
    matched_count: int


# PUBLIC_INTERFACE
class Database:
    """
    Storage gateway owning a single aiosqlite connection.

    Statements run in autocommit mode: every call issues exactly one statement
    and awaits its completion before returning. Engine errors (sqlite3.Error
    subclasses) propagate unchanged.
    """

    def __init__(self, db_path: str = ":memory:") -> None:
        self._db_path = db_path
        self._conn: Optional[aiosqlite.Connection] = None

    @property
    def path(self) -> str:
        return self._db_path

    @property
    def connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not connected")
        return self._conn

    async def connect(self) -> None:
        if self._conn is not None:
            return
        if self._db_path != ":memory:":
            os.makedirs(os.path.dirname(self._db_path) or ".", exist_ok=True)
        self._conn = await aiosqlite.connect(self._db_path, isolation_level=None)
        self._conn.row_factory = aiosqlite.Row
        logger.info("Database connected: %s", self._db_path)

    async def close(self) -> None:
        if self._conn is None:
            return
        await self._conn.close()
        self._conn = None
        logger.info("Database closed: %s", self._db_path)

    async def query(self, sql: str, params: Params = ()) -> List[Dict[str, Any]]:
        """Run a SELECT and return every row as a dict."""
        logger.debug("query: %s %r", sql, params)
        async with self.connection.execute(sql, params) as cursor:
            rows = await cursor.fetchall()
        return [dict(row) for row in rows]

    async def query_one(self, sql: str, params: Params = ()) -> Optional[Dict[str, Any]]:
        """Run a SELECT and return the first row, or None when nothing matched."""
        logger.debug("query_one: %s %r", sql, params)
        async with self.connection.execute(sql, params) as cursor:
            row = await cursor.fetchone()
        return dict(row) if row is not None else None

    async def execute(self, sql: str, params: Params = ()) -> ExecuteResult:
        """Run an INSERT/UPDATE/DELETE and report the insert id and matched row count."""
        logger.debug("execute: %s %r", sql, params)
        async with self.connection.execute(sql, params) as cursor:
            return ExecuteResult(last_insert_id=cursor.lastrowid, matched_count=cursor.rowcount)

    async def executescript(self, script: str) -> None:
        await self.connection.executescript(script)


async def init_schema(db: Database) -> None:
    """Create the todos table and its updatedAt trigger if they do not exist."""
    await db.executescript(SCHEMA_SQL)
    logger.info("Tables created")


async def seed_sample_data(db: Database) -> int:
    """Insert the sample todos, skipping titles already present. Returns the inserted count."""
    inserted = 0
    for title, completed, user_id in SAMPLE_TODOS:
        result = await db.execute(
            "INSERT OR IGNORE INTO todos (title, completed, userId) VALUES (?, ?, ?)",
            (title, completed, user_id),
        )
        inserted += result.matched_count
    logger.info("Sample data inserted: %d", inserted)
    return inserted
