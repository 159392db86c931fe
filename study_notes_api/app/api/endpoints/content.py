"""
Content endpoints.

These routes expose the subject → book → section → topic hierarchy for
browsing and allow the markdown body of a topic to be replaced.  All
listing routes share one set of optional query parameters
(``subject_id``, ``book_id``, ``section_id``); each route applies only
the identifiers relevant to it.
"""

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine

from study_notes_api.app.core.db import get_engine
from study_notes_api.app.core.errors import STORE_ERRORS, InternalError, NotFoundError
from study_notes_api.app.schemas.content import (
    HierarchyFilter,
    NamedRecord,
    Subject,
    Topic,
    UpdateTopic,
)
from study_notes_api.app.services.content_service import ContentService

router = APIRouter()


@router.get("/", response_model=List[Subject], summary="List all subjects")
async def list_subjects(engine: Engine = Depends(get_engine)) -> List[Subject]:
    """Return every subject ordered by ID."""
    try:
        return await ContentService.list_subjects(engine)
    except STORE_ERRORS as exc:
        raise InternalError("Error fetching subjects") from exc


@router.get("/books", response_model=List[NamedRecord], summary="List books of a subject")
async def list_books(
    query: HierarchyFilter = Depends(),
    engine: Engine = Depends(get_engine),
) -> List[NamedRecord]:
    """Return books whose ``subject_id`` equals the query value.

    Without ``subject_id`` the result is empty.
    """
    try:
        return await ContentService.list_books(engine, query)
    except STORE_ERRORS as exc:
        raise InternalError("Error fetching books") from exc


@router.get("/sections", response_model=List[NamedRecord], summary="List sections of a book")
async def list_sections(
    query: HierarchyFilter = Depends(),
    engine: Engine = Depends(get_engine),
) -> List[NamedRecord]:
    try:
        return await ContentService.list_sections(engine, query)
    except STORE_ERRORS as exc:
        raise InternalError("Error fetching sections") from exc


@router.get("/topics", response_model=List[Topic], summary="List topics")
async def list_topics(
    query: HierarchyFilter = Depends(),
    engine: Engine = Depends(get_engine),
) -> List[Topic]:
    """Return topics for a subject, or for a subject/book/section triple.

    When ``section_id`` is given, ``subject_id``, ``book_id`` and
    ``section_id`` must all match.  Otherwise only ``subject_id`` is
    used and ``book_id`` has no effect.
    """
    try:
        return await ContentService.list_topics(engine, query)
    except STORE_ERRORS as exc:
        raise InternalError("Error fetching topics") from exc


@router.post("/update", response_class=PlainTextResponse, summary="Replace topic markdown")
async def update_topic(
    body: UpdateTopic,
    engine: Engine = Depends(get_engine),
) -> str:
    """Overwrite the markdown of the topic ``body.topic_id``.

    Responds 404 when no topic has that ID.
    """
    try:
        updated = await ContentService.update_topic_markdown(engine, body.topic_id, body.markdown)
    except STORE_ERRORS as exc:
        raise InternalError("Error updating topic") from exc
    if not updated:
        raise NotFoundError("No topic found with the given ID")
    return "Topic successfully updated!"
