"""
Main entrypoints for the Study Notes services.

This module assembles two independent FastAPI applications that share
the same conventions: logging, permissive CORS, plain‑text error
responses and a SQLAlchemy engine whose connection pool lives for
the lifetime of the process.  ``create_content_app`` serves the
subject/book/section/topic hierarchy and ``create_todo_app`` the to‑do list.  Both are
instantiated at import time so they can be served directly, e.g.::

    uvicorn study_notes_api.app.main:content_app --port 8080
    uvicorn study_notes_api.app.main:todo_app --port 8081

``run.py`` at the repository root starts both in one process.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import content_router, todo_router
from .core.config import settings
from .core.db import open_engine
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _create_app(title: str, router: APIRouter, database_url: Optional[str]) -> FastAPI:
    setup_logging(settings.log_level, settings.log_file or None)
    url = database_url if database_url is not None else settings.database_url

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Failing to open the store is fatal: the exception aborts startup.
        try:
            app.state.engine = open_engine(
                url,
                pool_size=settings.db_pool_size,
                pool_timeout=settings.db_pool_timeout,
            )
        except Exception:
            logger.critical("%s: could not connect to database", title, exc_info=True)
            raise
        try:
            yield
        finally:
            app.state.engine.dispose()
            logger.info("%s: database engine disposed", title)

    app = FastAPI(title=title, version=settings.api_version, lifespan=lifespan)

    # Any origin may call the API; the browser frontend is served from a
    # different host and port.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app


def create_content_app(database_url: Optional[str] = None) -> FastAPI:
    """Create the content hierarchy service.

    Parameters
    ----------
    database_url : Optional[str]
        SQLite location overriding ``DATABASE_URL``.
    """
    return _create_app(f"{settings.project_name} (content)", content_router, database_url)


def create_todo_app(database_url: Optional[str] = None) -> FastAPI:
    """Create the to‑do list service.  See :func:`create_content_app`."""
    return _create_app(f"{settings.project_name} (todos)", todo_router, database_url)


content_app = create_content_app()
todo_app = create_todo_app()
