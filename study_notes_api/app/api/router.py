"""
Top‑level routers for the two services.

``content_router`` and ``todo_router`` are mounted at the root of
their respective applications; the services do not share paths.
"""

from fastapi import APIRouter

from .endpoints import content, todos

content_router = APIRouter()
content_router.include_router(content.router, tags=["content"])

todo_router = APIRouter()
todo_router.include_router(todos.router, tags=["todos"])
