import logging

import pytest

from tests.conftest import drop_table


def test_list_subjects_ordered_by_id(content_client):
    response = content_client.get("/")
    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Maths"}, {"id": 2, "name": "Physics"}]


def test_list_books_filters_by_subject(content_client):
    response = content_client.get("/books", params={"subject_id": 1})
    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Algebra"}, {"id": 2, "name": "Geometry"}]


def test_list_books_without_subject_is_empty(content_client):
    response = content_client.get("/books")
    assert response.status_code == 200
    assert response.json() == []


def test_list_books_rejects_non_integer_subject(content_client):
    response = content_client.get("/books", params={"subject_id": "abc"})
    assert response.status_code == 422


def test_list_sections_filters_by_book(content_client):
    response = content_client.get("/sections", params={"book_id": 1})
    assert response.json() == [
        {"id": 1, "name": "Linear equations"},
        {"id": 2, "name": "Quadratics"},
    ]
    assert content_client.get("/sections").json() == []


def test_list_topics_by_section(content_client):
    response = content_client.get(
        "/topics", params={"subject_id": 1, "book_id": 1, "section_id": 2}
    )
    assert response.status_code == 200
    assert response.json() == [{"id": 2, "name": "Factoring", "markdown": "# Factoring"}]


def test_list_topics_by_section_requires_matching_book(content_client):
    response = content_client.get(
        "/topics", params={"subject_id": 1, "book_id": 2, "section_id": 2}
    )
    assert response.json() == []


def test_list_topics_without_section_ignores_book(content_client):
    response = content_client.get("/topics", params={"subject_id": 1, "book_id": 2})
    assert [topic["id"] for topic in response.json()] == [1, 2, 3, 4]


def test_update_topic_then_read(content_client):
    response = content_client.post("/update", json={"markdown": "## New body", "topic_id": 3})
    assert response.status_code == 200
    assert response.text == "Topic successfully updated!"

    topics = content_client.get(
        "/topics", params={"subject_id": 1, "book_id": 2, "section_id": 3}
    ).json()
    assert topics == [{"id": 3, "name": "Pythagoras", "markdown": "## New body"}]


def test_update_unknown_topic_is_not_found(content_client):
    before = content_client.get("/topics", params={"subject_id": 1}).json()

    response = content_client.post("/update", json={"markdown": "lost", "topic_id": 999})
    assert response.status_code == 404
    assert response.text == "No topic found with the given ID"
    assert content_client.get("/topics", params={"subject_id": 1}).json() == before


def test_update_requires_body_fields(content_client):
    response = content_client.post("/update", json={"markdown": "no id"})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "table, path, params, message",
    [
        ("subjects", "/", None, "Error fetching subjects"),
        ("books", "/books", {"subject_id": 1}, "Error fetching books"),
        ("sections", "/sections", {"book_id": 1}, "Error fetching sections"),
        ("topics", "/topics", {"subject_id": 1}, "Error fetching topics"),
    ],
)
def test_store_failure_returns_plain_500(content_client, database, caplog, table, path, params, message):
    drop_table(database, table)
    with caplog.at_level(logging.ERROR):
        response = content_client.get(path, params=params)
    assert response.status_code == 500
    assert response.text == message
    assert f"no such table: {table}" in caplog.text


def test_update_store_failure_returns_500(content_client, database):
    drop_table(database, "topics")
    response = content_client.post("/update", json={"markdown": "x", "topic_id": 1})
    assert response.status_code == 500
    assert response.text == "Error updating topic"


def test_cors_allows_any_origin(content_client):
    response = content_client.get("/", headers={"Origin": "http://localhost:5173"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_list_topics_by_section_without_subject_or_book_is_empty(content_client):
    response = content_client.get("/topics", params={"section_id": 1})
    assert response.status_code == 200
    assert response.json() == []
