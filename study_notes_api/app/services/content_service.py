"""
Service for browsing the subject → book → section → topic hierarchy.

Every method issues a single parameterized statement and returns
either the complete result set or raises ``SQLAlchemyError``; partial
results are never returned.  Listing queries order by ``id`` so that
clients see a stable order.
"""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.engine import Engine

from study_notes_api.app.core.db import execute, fetch_all
from study_notes_api.app.schemas.content import HierarchyFilter, NamedRecord, Subject, Topic
from study_notes_api.app.services.filters import (
    books_predicate,
    sections_predicate,
    topics_predicate,
)

logger = logging.getLogger(__name__)


class ContentService:
    """Read access to the content hierarchy plus topic markdown updates."""

    @classmethod
    async def list_subjects(cls, engine: Engine) -> List[Subject]:
        rows = await fetch_all(engine, "SELECT id, name FROM subjects ORDER BY id")
        return [Subject(**row) for row in rows]

    @classmethod
    async def list_books(cls, engine: Engine, query: HierarchyFilter) -> List[NamedRecord]:
        """Return books belonging to ``query.subject_id``."""
        predicate = books_predicate(query)
        rows = await fetch_all(
            engine,
            f"SELECT id, name FROM books WHERE {predicate.where} ORDER BY id",
            predicate.params,
        )
        return [NamedRecord(**row) for row in rows]

    @classmethod
    async def list_sections(cls, engine: Engine, query: HierarchyFilter) -> List[NamedRecord]:
        """Return sections belonging to ``query.book_id``."""
        predicate = sections_predicate(query)
        rows = await fetch_all(
            engine,
            f"SELECT id, name FROM sections WHERE {predicate.where} ORDER BY id",
            predicate.params,
        )
        return [NamedRecord(**row) for row in rows]

    @classmethod
    async def list_topics(cls, engine: Engine, query: HierarchyFilter) -> List[Topic]:
        """Return topics matching the identifiers in ``query``.

        See :func:`~study_notes_api.app.services.filters.topics_predicate`
        for which identifiers are applied.
        """
        predicate = topics_predicate(query)
        rows = await fetch_all(
            engine,
            f"SELECT id, name, markdown FROM topics WHERE {predicate.where} ORDER BY id",
            predicate.params,
        )
        return [Topic(**row) for row in rows]

    @classmethod
    async def update_topic_markdown(cls, engine: Engine, topic_id: int, markdown: str) -> bool:
        """Overwrite the markdown of a topic.

        Returns
        -------
        bool
            ``True`` if at least one row changed, ``False`` if no topic
            has the given ID.
        """
        changed = await execute(
            engine,
            "UPDATE topics SET markdown = :markdown WHERE id = :topic_id",
            {"markdown": markdown, "topic_id": topic_id},
        )
        if changed:
            logger.info("Updated markdown of topic %s", topic_id)
        return changed > 0
