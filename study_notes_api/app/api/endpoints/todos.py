"""
Todo endpoints.

A deliberately small API: list every item, create one from a query
string and delete one by ID.  Creation and deletion are plain ``GET``
requests and answer with a short text acknowledgment.
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine

from study_notes_api.app.core.db import get_engine
from study_notes_api.app.core.errors import STORE_ERRORS, InternalError
from study_notes_api.app.schemas.todo import TodoItem
from study_notes_api.app.services.todo_service import TodoService

router = APIRouter()


@router.get("/", response_model=List[TodoItem], summary="List all todo items")
async def list_todos(engine: Engine = Depends(get_engine)) -> List[TodoItem]:
    try:
        return await TodoService.list_todos(engine)
    except STORE_ERRORS as exc:
        raise InternalError("Error fetching todos") from exc


@router.get("/create", response_class=PlainTextResponse, summary="Create a todo item")
async def create_todo(
    description: str = Query(..., description="Text of the new item, stored verbatim."),
    engine: Engine = Depends(get_engine),
) -> str:
    """Create a new item that is not done yet.

    The created item is not echoed back; list the items to see it.
    """
    try:
        await TodoService.create_todo(engine, description)
    except STORE_ERRORS as exc:
        raise InternalError("Error creating todo") from exc
    return "Todo created"


@router.get("/delete/{todo_id}", response_class=PlainTextResponse, summary="Delete a todo item")
async def delete_todo(todo_id: int, engine: Engine = Depends(get_engine)) -> str:
    """Delete the item with ``todo_id``.

    Succeeds whether or not such an item existed.
    """
    try:
        await TodoService.delete_todo(engine, todo_id)
    except STORE_ERRORS as exc:
        raise InternalError("Error deleting todo") from exc
    return "Todo deleted"
