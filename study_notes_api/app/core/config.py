"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for every field except
``database_url``, which must point at an existing SQLite file before
either service can start.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Study Notes API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Location of the SQLite store, e.g. ``sqlite:notes.db``.  The file and
    # its tables are expected to exist already.
    database_url: str = os.getenv("DATABASE_URL", "")
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))
    db_pool_timeout: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` permits every origin, which is what the frontend
    # relies on during development.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    content_host: str = os.getenv("CONTENT_HOST", "127.0.0.1")
    content_port: int = int(os.getenv("CONTENT_PORT", "8080"))
    todo_host: str = os.getenv("TODO_HOST", "127.0.0.1")
    todo_port: int = int(os.getenv("TODO_PORT", "8081"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
