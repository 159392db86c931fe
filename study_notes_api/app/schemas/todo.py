"""Pydantic models for the todo service."""

from pydantic import BaseModel


class TodoItem(BaseModel):
    """A single to‑do entry.

    ``done`` is stored as ``0``/``1`` in SQLite and coerced to a boolean
    on the way out.
    """

    id: int
    description: str
    done: bool = False
