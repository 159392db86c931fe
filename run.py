"""Unified entry point for the content and todo services.

Starts both FastAPI applications concurrently in one process, each on
its own host and port (``CONTENT_HOST``/``CONTENT_PORT`` and
``TODO_HOST``/``TODO_PORT``).  ``DATABASE_URL`` must point at an
existing SQLite database containing the ``subjects``, ``books``,
``sections``, ``topics`` and ``todos`` tables.

Usage:
    DATABASE_URL=sqlite:notes.db python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from study_notes_api.app.core.config import settings
from study_notes_api.app.main import content_app, todo_app


async def serve(app, host: str, port: int) -> None:
    """Serve ``app`` until shutdown; raise if its startup failed."""
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()
    if not server.started:
        raise RuntimeError(f"{app.title} failed to start on {host}:{port}")


async def main() -> int:
    """Run both services; if one stops, stop the other."""
    tasks = [
        asyncio.create_task(serve(content_app, settings.content_host, settings.content_port)),
        asyncio.create_task(serve(todo_app, settings.todo_host, settings.todo_port)),
    ]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    exit_code = 0
    for task in done:
        if exception := task.exception():
            logging.error("Exception in service", exc_info=exception)
            exit_code = 1
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    return exit_code


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
