"""
Pydantic models for the content hierarchy.

Subjects contain books, books contain sections, and topics hang off a
subject, a book and optionally a section.  Only the columns the API
exposes are modelled here; foreign keys stay in the database.
"""

from typing import Optional

from pydantic import BaseModel


class NamedRecord(BaseModel):
    """``{id, name}`` row returned for subjects, books and sections."""

    id: int
    name: str


class Subject(NamedRecord):
    """Top level of the hierarchy."""


class Topic(BaseModel):
    """Leaf of the hierarchy carrying the markdown body."""

    id: int
    name: str
    markdown: str


class UpdateTopic(BaseModel):
    """Request body for ``POST /update``."""

    markdown: str
    topic_id: int


class HierarchyFilter(BaseModel):
    """Optional identifiers accepted by the listing endpoints.

    Every field is either an integer or absent (``None``).  Which fields
    a given endpoint consults is decided by the predicate functions in
    ``services.filters``.
    """

    subject_id: Optional[int] = None
    book_id: Optional[int] = None
    section_id: Optional[int] = None
