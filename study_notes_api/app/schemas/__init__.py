"""
Pydantic schema definitions for API payloads.

The content and todo services each define their own models for
request and response bodies.  Schemas mirror table columns but are
kept separate from the SQL in the service layer.
"""
