import json

import pytest
import requests

from study_notes_client import StudyNotesClient


def make_response(status_code, body, content_type="application/json"):
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.url = "http://test/"
    return response


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return StudyNotesClient(content_url="http://content/", todo_url="http://todo", session=session)


def test_list_subjects(client, session):
    session.responses.append(make_response(200, [{"id": 1, "name": "Maths"}]))
    subjects, error = client.list_subjects()
    assert error is None
    assert subjects == [{"id": 1, "name": "Maths"}]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://content/"


def test_list_topics_drops_absent_params(client, session):
    session.responses.append(make_response(200, []))
    client.list_topics(1, book_id=2)
    assert session.calls[0]["url"] == "http://content/topics"
    assert session.calls[0]["params"] == {"subject_id": 1, "book_id": 2}


def test_update_topic_sends_json_body(client, session):
    session.responses.append(make_response(200, "Topic successfully updated!", "text/plain"))
    ok, error = client.update_topic(3, "# Body")
    assert ok is True and error is None
    assert session.calls[0]["json"] == {"markdown": "# Body", "topic_id": 3}


def test_update_unknown_topic_reports_404(client, session):
    session.responses.append(make_response(404, "No topic found with the given ID", "text/plain"))
    ok, error = client.update_topic(999, "x")
    assert ok is False
    assert error == {"status_code": 404, "message": "No topic found with the given ID"}


def test_todo_calls(client, session):
    session.responses.extend(
        [
            make_response(200, "Todo created", "text/plain"),
            make_response(200, "Todo deleted", "text/plain"),
        ]
    )
    assert client.create_todo("") == (True, None)
    assert client.delete_todo(5) == (True, None)
    assert session.calls[0]["url"] == "http://todo/create"
    assert session.calls[0]["params"] == {"description": ""}
    assert session.calls[1]["url"] == "http://todo/delete/5"


def test_connection_error_is_reported(client, session):
    session.responses.append(requests.ConnectionError("refused"))
    todos, error = client.list_todos()
    assert todos == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
