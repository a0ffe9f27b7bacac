"""Student Registry API client.

A thin wrapper around the registry's REST API built on ``requests``.
It exposes the two operations the service offers:

* :meth:`StudentRegistryClient.register_student` – register a new student.
* :meth:`StudentRegistryClient.list_students` – list every registered student.

Both methods return a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with the keys ``status_code``, ``message`` and,
for validation failures, ``errors`` with the messages reported per field.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

STUDENTS_PATH = "/api/v1/estudiantes"


class StudentRegistryClient:
    """HTTP client for the Student Registry API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            timeout: Seconds to wait for each response.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request and split the result into ``(data, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            error = self._error_from_response(exc)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Dict[str, Any]:
        response = exc.response
        if response is None:
            return {"status_code": None, "message": str(exc)}
        error: Dict[str, Any] = {"status_code": response.status_code, "message": str(exc)}
        try:
            body = response.json()
        except ValueError:
            if response.text:
                error["message"] = response.text
            return error
        if isinstance(body, dict):
            error["message"] = body.get("message") or body.get("detail") or error["message"]
            if body.get("errors"):
                error["errors"] = body["errors"]
        return error

    def register_student(
        self, student_id: str, nombre: str, carrera: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Register a student.

        Returns:
            A tuple ``(student, error)``.  A taken id yields an error with
            ``status_code`` 409; missing or blank fields yield 400.
        """
        payload = {"id": student_id, "nombre": nombre, "carrera": carrera}
        return self._request("POST", STUDENTS_PATH, json_body=payload)

    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all registered students.

        Returns:
            A tuple ``(students, error)``.  ``students`` is empty on failure.
        """
        data, error = self._request("GET", STUDENTS_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None
