from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ..db import Database
from ..schemas import (
    ErrorOut,
    MessageOut,
    TodoCreate,
    TodoEnvelope,
    TodoListEnvelope,
    TodoUpdate,
)
from ..services import TodoService

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)

NOT_FOUND_BODY = {"message": "Todo item not found"}

_ERROR_RESPONSES = {
    400: {"model": ErrorOut, "description": "Invalid identifier or payload"},
    500: {"model": ErrorOut, "description": "Storage failure"},
}


def get_database(request: Request) -> Database:
    """
    Dependency returning the storage gateway opened by the application lifespan.
    """
    return request.app.state.db


def get_todo_service(db: Database = Depends(get_database)) -> TodoService:
    return TodoService(db)


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND_BODY)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TodoListEnvelope,
    summary="List Todos",
    description="Return every todo item ordered by id.",
    responses={500: _ERROR_RESPONSES[500]},
)
async def list_todos(service: TodoService = Depends(get_todo_service)):
    """
    List all todos.
    """
    return {"todos": await service.find_all()}


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the persisted record.",
    responses={
        201: {"description": "Todo created successfully"},
        409: {"model": ErrorOut, "description": "Title already taken"},
        **_ERROR_RESPONSES,
    },
)
async def create_todo(payload: TodoCreate, service: TodoService = Depends(get_todo_service)):
    """
    Create a new Todo.
    """
    created = await service.create(payload.model_dump())
    return {"todo": created}


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoEnvelope,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"model": MessageOut, "description": "Todo not found"},
        **_ERROR_RESPONSES,
    },
)
async def get_todo(todo_id: str, service: TodoService = Depends(get_todo_service)):
    """
    Retrieve a single Todo item by its ID.
    """
    item = await service.find_by_id(todo_id)
    if not item:
        return _not_found()
    return {"todo": item}


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoEnvelope,
    response_model_exclude_none=True,
    summary="Update Todo",
    description=(
        "Partially update a Todo item. Only title and completed are written; the response "
        "echoes the supplied fields and omits the rest."
    ),
    responses={
        200: {"description": "Todo updated"},
        404: {"model": MessageOut, "description": "Todo not found"},
        409: {"model": ErrorOut, "description": "Title already taken"},
        **_ERROR_RESPONSES,
    },
)
async def update_todo(
    todo_id: str,
    payload: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
):
    """
    Update a Todo after confirming it exists.
    """
    item = await service.find_by_id(todo_id)
    if not item:
        return _not_found()
    updated = await service.update(item["id"], payload.model_dump(exclude_unset=True))
    return {"todo": updated}


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=MessageOut,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        200: {"description": "Todo deleted"},
        404: {"model": MessageOut, "description": "Todo not found"},
        **_ERROR_RESPONSES,
    },
)
async def delete_todo(todo_id: str, service: TodoService = Depends(get_todo_service)):
    """
    Delete a Todo. Returns 200 on success, 404 if not found.
    """
    item = await service.find_by_id(todo_id)
    if not item:
        return _not_found()
    await service.delete(item["id"])
    return {"message": "Todo item deleted successfully"}
