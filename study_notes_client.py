"""Study Notes API client.

A thin wrapper around the content and todo services using the
``requests`` library.  It is what the browser frontend does with
``fetch`` (load the subject list, drill down into books, sections and
topics, save edited markdown) packaged for scripts and other Python
programs.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is empty or ``None`` and
``error`` is a dictionary with keys ``status_code`` and ``message``.
Network errors are reported the same way with ``status_code`` set to
``None``; no method raises for transport or HTTP failures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StudyNotesClient:
    """Client for the content service and the todo service.

    The two services listen on different base URLs; either may be
    omitted if the caller only talks to one of them.
    """

    def __init__(
        self,
        *,
        content_url: str = "http://127.0.0.1:8080",
        todo_url: str = "http://127.0.0.1:8081",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            content_url: Base URL of the content service.
            todo_url: Base URL of the todo service.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.content_url = content_url.rstrip("/")
        self.todo_url = todo_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, url: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request.

        JSON responses are decoded; anything else (the services answer
        mutations with plain text) is returned as a string.
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if "application/json" in response.headers.get("Content-Type", ""):
            return response.json(), None
        return response.text, None

    def _list(self, url: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", url, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Content hierarchy
    # ------------------------------------------------------------------
    def list_subjects(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.content_url}/")

    def list_books(self, subject_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.content_url}/books", {"subject_id": subject_id})

    def list_sections(self, book_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.content_url}/sections", {"book_id": book_id})

    def list_topics(
        self,
        subject_id: int,
        book_id: Optional[int] = None,
        section_id: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve topics of a subject, or of one section of a book.

        The server only applies ``book_id`` together with ``section_id``.
        """
        params = {"subject_id": subject_id, "book_id": book_id, "section_id": section_id}
        return self._list(f"{self.content_url}/topics", params)

    def update_topic(self, topic_id: int, markdown: str) -> Tuple[bool, Optional[Error]]:
        """Replace the markdown body of a topic.

        Returns:
            ``(True, None)`` on success.  An unknown ``topic_id`` yields
            ``(False, {"status_code": 404, ...})``.
        """
        _, error = self._request(
            "POST",
            f"{self.content_url}/update",
            json_body={"markdown": markdown, "topic_id": topic_id},
        )
        return error is None, error

    # ------------------------------------------------------------------
    # Todo list
    # ------------------------------------------------------------------
    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.todo_url}/")

    def create_todo(self, description: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("GET", f"{self.todo_url}/create", params={"description": description})
        return error is None, error

    def delete_todo(self, todo_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a todo item.  Unknown IDs are reported as success by the server."""
        _, error = self._request("GET", f"{self.todo_url}/delete/{todo_id}")
        return error is None, error
