"""
SQLAlchemy engine over the SQLite store, plus raw SQL helpers.

Each service owns one :class:`~sqlalchemy.engine.Engine` for the
lifetime of the process.  The engine's ``QueuePool`` is the shared
connection pool: it is created in the application lifespan (see
``app/main.py``), stored on ``app.state`` and handed to request
handlers through the :func:`get_engine` dependency.

The schema is managed outside this code base: the engine opens an
existing database file in read‑write mode and refuses to create a new
one.  Statements use SQLAlchemy ``text()`` with named ``:param`` binds.

SQLite access is blocking, so :func:`fetch_all` and :func:`execute`
run each statement in the server's worker thread pool and leave the
event loop free while the statement runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.pool import QueuePool
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)


def resolve_database_path(url: str) -> str:
    """Turn a ``DATABASE_URL`` value into a filesystem path.

    Accepts ``sqlite:notes.db``, ``sqlite://notes.db``,
    ``sqlite:///abs/notes.db`` and bare paths.  Query strings such as
    ``?mode=rwc`` are dropped.
    """
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    if url.startswith("sqlite://"):
        url = url[len("sqlite://"):]
    elif url.startswith("sqlite:"):
        url = url[len("sqlite:"):]
    path = url.split("?", 1)[0]
    if not path:
        raise RuntimeError("DATABASE_URL does not name a database file.")
    return path


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def open_engine(database_url: str, pool_size: int = 5, pool_timeout: int = 30) -> Engine:
    """Create the engine for ``database_url`` and verify the store answers.

    The pool holds at most ``pool_size`` connections; further borrowers
    wait up to ``pool_timeout`` seconds.  Any failure propagates to the
    caller; at startup this aborts the service.
    """
    path = Path(resolve_database_path(database_url)).resolve()
    # mode=rw makes a missing file an error instead of silently
    # creating an empty database.
    url = URL.create(
        "sqlite",
        database=f"file:{path.as_posix()}",
        query={"mode": "rw", "uri": "true"},
    )
    engine = create_engine(
        url,
        poolclass=QueuePool,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise
    logger.info("Opened SQLite engine for %s (pool_size=%d)", path, pool_size)
    return engine


def get_engine(request: Request) -> Engine:
    """FastAPI dependency returning the engine of the serving application."""
    return request.app.state.engine


async def fetch_all(engine: Engine, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """

    def _run() -> List[Dict[str, Any]]:
        with engine.connect() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            return [dict(row) for row in result.mappings()]

    return await run_in_threadpool(_run)


async def execute(engine: Engine, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
    """
    Run a statement (INSERT/UPDATE/DELETE) in its own transaction and
    return the affected row count.
    """

    def _run() -> int:
        with engine.begin() as conn:
            return conn.execute(text(sql), dict(params or {})).rowcount

    return await run_in_threadpool(_run)
