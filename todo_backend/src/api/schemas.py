from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    userId is optional at the HTTP boundary; when omitted the insert fails
    on the column's NOT NULL rule and the error surfaces as a 500.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "completed": False,
                "userId": 1,
            }
        }
    )

    title: str = Field(..., description="Title of the todo item, unique across all todos", min_length=1)
    completed: bool = Field(default=False, description="Completion status flag")
    userId: Optional[int] = Field(default=None, description="Identifier of the owning user")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only title and completed are written.
    userId is echoed back in the response but never stored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries and supplies",
                "completed": True,
            }
        }
    )

    title: Optional[str] = Field(default=None, description="New title; empty strings are ignored")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")
    userId: Optional[int] = Field(default=None, description="Identifier of the owning user")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.

    Responses to an update only carry the fields that were supplied.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy groceries",
                "completed": False,
                "userId": 1,
                "createdAt": "2025-01-25 10:15:30",
                "updatedAt": "2025-01-26 09:00:00",
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: Optional[str] = Field(default=None, description="Title of the todo item")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")
    userId: Optional[int] = Field(default=None, description="Identifier of the owning user")
    createdAt: Optional[str] = Field(default=None, description="Creation timestamp")
    updatedAt: Optional[str] = Field(default=None, description="Last update timestamp")


class TodoEnvelope(BaseModel):
    todo: TodoOut


class TodoListEnvelope(BaseModel):
    todos: List[TodoOut]


class MessageOut(BaseModel):
    message: str = Field(..., description="Human readable outcome")


class ErrorOut(BaseModel):
    """Body returned for unmatched routes and errors raised by handlers."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="HTTP reason phrase")
    reason: str = Field(..., description="What went wrong")
