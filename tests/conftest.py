import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from study_notes_api.app.main import create_content_app, create_todo_app

SCHEMA = Path(__file__).resolve().parent.parent / "schema.sql"


@pytest.fixture
def database(tmp_path):
    path = tmp_path / "notes.db"
    conn = sqlite3.connect(path)
    conn.executescript(SCHEMA.read_text(encoding="utf-8"))
    conn.executemany(
        "INSERT INTO subjects (id, name) VALUES (?, ?)",
        [(2, "Physics"), (1, "Maths")],
    )
    conn.executemany(
        "INSERT INTO books (id, name, subject_id) VALUES (?, ?, ?)",
        [(3, "Mechanics", 2), (1, "Algebra", 1), (2, "Geometry", 1)],
    )
    conn.executemany(
        "INSERT INTO sections (id, name, book_id) VALUES (?, ?, ?)",
        [(1, "Linear equations", 1), (2, "Quadratics", 1), (3, "Triangles", 2)],
    )
    conn.executemany(
        "INSERT INTO topics (id, name, markdown, subject_id, book_id, section_id) VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, "Solving for x", "# Solving for x", 1, 1, 1),
            (2, "Factoring", "# Factoring", 1, 1, 2),
            (3, "Pythagoras", "a^2 + b^2 = c^2", 1, 2, 3),
            (4, "Algebra overview", "Overview", 1, 1, None),
            (5, "Newton's laws", "F = ma", 2, 3, None),
        ],
    )
    conn.executemany(
        "INSERT INTO todos (id, description, done) VALUES (?, ?, ?)",
        [(1, "Read chapter 1", 0), (2, "Write summary", 1)],
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def content_client(database):
    with TestClient(create_content_app(f"sqlite:{database}")) as client:
        yield client


@pytest.fixture
def todo_client(database):
    with TestClient(create_todo_app(f"sqlite:{database}")) as client:
        yield client


def drop_table(database, table):
    conn = sqlite3.connect(database)
    conn.execute(f"DROP TABLE {table}")
    conn.commit()
    conn.close()


@pytest.fixture
def anyio_backend():
    return "asyncio"
