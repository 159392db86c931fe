"""
Service for the flat to‑do list.

Items are created with ``done = 0`` and deleted by ID.  Deleting an
unknown ID is not an error: the affected row count is logged but not
reported to the caller.
"""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.engine import Engine

from study_notes_api.app.core.db import execute, fetch_all
from study_notes_api.app.schemas.todo import TodoItem

logger = logging.getLogger(__name__)


class TodoService:
    """Service class for listing, creating and deleting todo items."""

    @classmethod
    async def list_todos(cls, engine: Engine) -> List[TodoItem]:
        rows = await fetch_all(engine, "SELECT id, description, done FROM todos ORDER BY id")
        return [TodoItem(**row) for row in rows]

    @classmethod
    async def create_todo(cls, engine: Engine, description: str) -> None:
        """Insert a new, not yet done item with ``description`` as given."""
        await execute(
            engine,
            "INSERT INTO todos (description, done) VALUES (:description, 0)",
            {"description": description},
        )
        logger.info("Created todo item")

    @classmethod
    async def delete_todo(cls, engine: Engine, todo_id: int) -> None:
        deleted = await execute(engine, "DELETE FROM todos WHERE id = :todo_id", {"todo_id": todo_id})
        logger.info("Deleted todo %s (%d row(s) affected)", todo_id, deleted)
