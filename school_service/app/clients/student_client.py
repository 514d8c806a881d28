"""Student Service client.

``StudentClient`` is the boundary the School Service uses to ask the
Student Service which students belong to a school.
``HttpStudentClient`` implements it over HTTP with the ``requests``
library; tests substitute their own implementation.

The HTTP client performs exactly one ``GET {base_url}/school/{id}``
per lookup.  Every failure, whether the request could not be sent,
the server answered with a non-2xx status, or the body is not a JSON
list of students, is raised as :class:`RemoteCallError`.  An empty
list is only ever returned when the Student Service itself answered
with one.  There is no retry, and no timeout unless one is passed
in.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import RemoteCallError
from ..schemas.student import Student


logger = logging.getLogger(__name__)

_students_adapter = TypeAdapter(List[Student])


class StudentClient(ABC):
    """Lookup of students by school in the Student Service."""

    @abstractmethod
    def find_all_students_by_school(self, school_id: int) -> List[Student]:
        """Return the students the Student Service holds for ``school_id``.

        Raises:
            RemoteCallError: if the lookup could not be completed.
        """

    def close(self) -> None:
        """Release any resources held by the client."""


class HttpStudentClient(StudentClient):
    """``requests`` based client for the Student Service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: URL of the Student Service's student resource,
                e.g. ``http://localhost:8090/api/v1/students``.
            session: Optional requests session.  If not supplied a
                session is created and owned by the client.
            timeout: Optional number of seconds to wait for a response.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def find_all_students_by_school(self, school_id: int) -> List[Student]:
        data = self._get(f"/school/{school_id}")
        if not isinstance(data, list):
            logger.error("Unexpected student list payload for school %s: %r", school_id, data)
            raise RemoteCallError("Student service returned a non-list payload")
        try:
            return _students_adapter.validate_python(data)
        except ValidationError as exc:
            logger.error("Invalid student payload for school %s: %s", school_id, exc)
            raise RemoteCallError("Student service returned invalid students") from exc

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def _get(self, path: str) -> Any:
        """Perform a GET request and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.request(
                method="GET",
                url=url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Student service request to %s failed: %s", url, exc)
            raise RemoteCallError("Cannot reach student service") from exc

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.error("Student service request failed (%s): %s", response.status_code, message)
            raise RemoteCallError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Student service returned a non-JSON body from %s", url)
            raise RemoteCallError("Student service returned a non-JSON body") from exc

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(body, dict):
            return str(body.get("detail") or body.get("message") or body)
        return str(body)
