"""
Error types surfaced to API callers.

Only two kinds of failure reach a client: :class:`NotFoundError` when a
mutation matched no rows and :class:`InternalError` when the store
failed.  Both are rendered as plain text; the underlying cause of an
internal error is logged but never sent to the client.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors rendered as a plain‑text response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    status_code = 404


class InternalError(ApiError):
    """A data‑access failure.  Raise it ``from`` the original exception."""

    status_code = 500


async def api_error_handler(request: Request, exc: ApiError) -> PlainTextResponse:
    if isinstance(exc, InternalError):
        logger.error(
            "%s %s failed: %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc.__cause__,
            exc_info=exc,
        )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)


# Failures endpoints turn into ``InternalError``: the store itself failed,
# or a stored row does not fit its response model.
STORE_ERRORS = (SQLAlchemyError, ValidationError)
