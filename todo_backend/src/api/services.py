from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Mapping, NoReturn, Optional

from .db import Database
from .errors import ConflictError, InternalError, NotFoundError, ValidationError
from .models import TodoEntity, row_to_entity

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Todo item not found."


def _is_unique_violation(exc: sqlite3.Error) -> bool:
    if getattr(exc, "sqlite_errorname", None) == "SQLITE_CONSTRAINT_UNIQUE":
        return True
    return isinstance(exc, sqlite3.IntegrityError) and str(exc).startswith("UNIQUE constraint failed")


def _raise_storage_error(exc: sqlite3.Error, title: Any = None) -> NoReturn:
    """Reclassify an engine error: uniqueness violations become conflicts, the rest internal."""
    if _is_unique_violation(exc):
        logger.warning("Duplicate todo title rejected: %r", title)
        raise ConflictError(f"Todo title must be unique. Found duplicate '{title}'") from exc
    raise InternalError(str(exc)) from exc


# Largest value the engine can store in an INTEGER column.
MAX_ROW_ID = 2**63 - 1


def _require_id(todo_id: Any) -> None:
    if isinstance(todo_id, bool):
        raise ValidationError("ID must be a number.")
    if todo_id is None or todo_id == "" or todo_id == 0:
        raise ValidationError("ID is required.")


def _beyond_storage_range(todo_id: Any) -> bool:
    return isinstance(todo_id, int) and not -MAX_ROW_ID - 1 <= todo_id <= MAX_ROW_ID


def _parse_id(todo_id: Any) -> int:
    _require_id(todo_id)
    if isinstance(todo_id, float) and not todo_id.is_integer():
        raise ValidationError("ID must be a number.")
    try:
        number = int(todo_id)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("ID must be a number.") from None
    if number < 1:
        raise ValidationError("ID must be greater than 0.")
    return number


# PUBLIC_INTERFACE
class TodoService:
    """
    Todo operations on top of the storage gateway.

    Inputs are validated before any statement is issued. Engine errors are
    reclassified: uniqueness violations raise ConflictError, every other
    sqlite3.Error raises InternalError carrying the engine message verbatim.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    async def find_all(self) -> List[TodoEntity]:
        """Return every todo ordered by id."""
        try:
            rows = await self._db.query("SELECT * FROM todos ORDER BY id")
        except sqlite3.Error as exc:
            _raise_storage_error(exc)
        return [row_to_entity(r) for r in rows]

    async def find_by_id(self, todo_id: Any) -> Optional[TodoEntity]:
        """
        Return the todo with the given id, or None if no row matches.

        Raises:
            ValidationError: id is missing, not a number, or less than 1.
        """
        number = _parse_id(todo_id)
        if number > MAX_ROW_ID:
            return None
        try:
            row = await self._db.query_one("SELECT * FROM todos WHERE id = ?", (number,))
        except sqlite3.Error as exc:
            _raise_storage_error(exc)
        return row_to_entity(row) if row else None

    async def find_by_title(self, title: Any) -> Optional[TodoEntity]:
        """Return the todo whose title matches exactly, or None."""
        if not title:
            raise ValidationError("Title is required.")
        if not isinstance(title, str):
            raise ValidationError("Title must be a string.")
        try:
            row = await self._db.query_one("SELECT * FROM todos WHERE title = ?", (title,))
        except sqlite3.Error as exc:
            _raise_storage_error(exc)
        return row_to_entity(row) if row else None

    async def create(self, todo: Optional[Mapping[str, Any]]) -> TodoEntity:
        """
        Insert a todo and return the persisted row.

        title and userId are passed to the engine as given; a missing value
        surfaces as the engine's NOT NULL failure. completed is only written
        when supplied so the column default applies otherwise.

        Raises:
            ValidationError: todo is None.
            ConflictError: the title is already taken.
            InternalError: any other engine failure.
        """
        if todo is None:
            raise ValidationError("Todo object is required.")

        title = todo.get("title")
        columns = ["title", "userId"]
        params: List[Any] = [title, todo.get("userId")]
        if todo.get("completed") is not None:
            columns.append("completed")
            params.append(todo["completed"])

        placeholders = ", ".join("?" for _ in columns)
        try:
            result = await self._db.execute(
                f"INSERT INTO todos ({', '.join(columns)}) VALUES ({placeholders})", params
            )
            row = await self._db.query_one(
                "SELECT * FROM todos WHERE id = ?", (result.last_insert_id,)
            )
        except sqlite3.Error as exc:
            _raise_storage_error(exc, title)

        if row is None:
            raise InternalError(f"Todo {result.last_insert_id} vanished after insert")
        logger.info("Created todo %s", result.last_insert_id)
        return row_to_entity(row)

    async def update(self, todo_id: Any, todo: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Apply a partial update and echo the supplied fields.

        A title is written only when truthy, so an empty string is ignored.
        completed is written whenever it is not None, so False is applied.
        The returned mapping echoes title/completed/userId from ``todo``;
        fields that were not supplied come back as None rather than the
        stored value.

        Raises:
            ValidationError: id missing or a bool, todo missing, or nothing to update.
            NotFoundError: no row matched id, or id is outside the storage range.
            ConflictError: the new title is already taken.
        """
        _require_id(todo_id)
        if todo is None:
            raise ValidationError("Todo object is required.")

        assignments: List[str] = []
        params: List[Any] = []
        if todo.get("title"):
            assignments.append("title = ?")
            params.append(todo["title"])
        if todo.get("completed") is not None:
            assignments.append("completed = ?")
            params.append(todo["completed"])

        if not assignments:
            raise ValidationError("Required fields are missing.")

        if _beyond_storage_range(todo_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        params.append(todo_id)
        try:
            result = await self._db.execute(
                f"UPDATE todos SET {', '.join(assignments)} WHERE id = ?", params
            )
        except sqlite3.Error as exc:
            _raise_storage_error(exc, todo.get("title"))

        if result.matched_count == 0:
            logger.info("Update matched no todo with id %r", todo_id)
            raise NotFoundError(NOT_FOUND_MESSAGE)

        return {
            "id": todo_id,
            "title": todo.get("title"),
            "completed": todo.get("completed"),
            "userId": todo.get("userId"),
        }

    async def delete(self, todo_id: Any) -> int:
        """
        Delete a todo and return the number of rows removed.

        Raises:
            ValidationError: id is missing, zero, or a bool.
            NotFoundError: no row matched id, or id is outside the storage range.
        """
        _require_id(todo_id)
        if _beyond_storage_range(todo_id):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        try:
            result = await self._db.execute("DELETE FROM todos WHERE id = ?", (todo_id,))
        except sqlite3.Error as exc:
            _raise_storage_error(exc)

        if result.matched_count == 0:
            logger.info("Delete matched no todo with id %r", todo_id)
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return result.matched_count
