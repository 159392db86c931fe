"""
Service layer abstraction.

Each service wraps the SQL for one domain (content hierarchy, todos)
and issues exactly one statement per call through the shared
SQLAlchemy engine.  Endpoint modules translate service results and
``SQLAlchemyError``/``ValidationError`` failures into HTTP responses.
"""
