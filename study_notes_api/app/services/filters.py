"""
Pure mapping from ``HierarchyFilter`` to SQL predicates.

Absent identifiers are bound as ``NULL``.  Because ``col = NULL`` is
never true in SQL, an absent ``subject_id`` on ``/books`` (or
``book_id`` on ``/sections``) matches no rows rather than all rows.
``/topics`` only consults ``book_id`` when ``section_id`` is given.
Both behaviours are kept as the public contract of the listing
endpoints; see DESIGN.md.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from study_notes_api.app.schemas.content import HierarchyFilter


@dataclass(frozen=True)
class Predicate:
    """A ``WHERE`` fragment and the values of its named binds."""

    where: str
    params: Dict[str, Any] = field(default_factory=dict)


def books_predicate(query: HierarchyFilter) -> Predicate:
    return Predicate("subject_id = :subject_id", {"subject_id": query.subject_id})


def sections_predicate(query: HierarchyFilter) -> Predicate:
    return Predicate("book_id = :book_id", {"book_id": query.book_id})


def topics_predicate(query: HierarchyFilter) -> Predicate:
    """Filter topics by subject, book and section, or by subject alone.

    With ``section_id`` present all three identifiers must match
    exactly, so a missing ``subject_id`` or ``book_id`` matches nothing.
    Without it only ``subject_id`` is applied and ``book_id`` is
    ignored.
    """
    if query.section_id is not None:
        return Predicate(
            "subject_id = :subject_id AND book_id = :book_id AND section_id = :section_id",
            {
                "subject_id": query.subject_id,
                "book_id": query.book_id,
                "section_id": query.section_id,
            },
        )
    return Predicate("subject_id = :subject_id", {"subject_id": query.subject_id})
