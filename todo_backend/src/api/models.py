from __future__ import annotations

from typing import Any, Mapping, Optional, TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A persisted Todo row as returned by the service.

    Fields:
    - id: Engine-assigned integer identifier
    - title: Title, unique across all todos
    - completed: Boolean completion flag
    - userId: Identifier of the owning user
    - createdAt: Engine-assigned creation timestamp ('YYYY-MM-DD HH:MM:SS')
    - updatedAt: Refreshed by trigger on every update
    """

    id: int
    title: str
    completed: bool
    userId: int
    createdAt: Optional[str]
    updatedAt: Optional[str]


def row_to_entity(row: Mapping[str, Any]) -> TodoEntity:
    return {
        "id": int(row["id"]),
        "title": str(row["title"]),
        "completed": bool(row["completed"]),
        "userId": int(row["userId"]),
        "createdAt": row["createdAt"],
        "updatedAt": row["updatedAt"],
    }
