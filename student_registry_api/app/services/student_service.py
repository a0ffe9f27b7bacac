"""
Service layer for student registration.

``StudentService`` owns the business rule of the registry: an identifier
can be registered once.  It validates the payload itself rather than
trusting the caller, then delegates the atomic check-and-insert to the
injected ``StudentStore``.  Outcomes are returned as values from
``core.errors``; the API layer decides how each one is rendered.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from student_registry_api.app.core.errors import (
    ConflictError,
    InternalError,
    Outcome,
    Success,
    ValidationError,
)
from student_registry_api.app.core.store import StudentStore
from student_registry_api.app.schemas.student import Student, StudentCandidate
from student_registry_api.app.services.validation import validate_candidate

logger = logging.getLogger(__name__)


class StudentService:
    """Register and list students held in a ``StudentStore``."""

    def __init__(self, store: StudentStore) -> None:
        self._store = store

    @property
    def store(self) -> StudentStore:
        return self._store

    def register(self, candidate: Union[StudentCandidate, Mapping[str, Any]]) -> Outcome:
        """Validate ``candidate`` and store it if its id is free.

        Returns ``Success`` with the record exactly as submitted,
        ``ValidationError`` listing every violated field (the store is
        not touched), ``ConflictError`` when the id is already taken (the
        existing record is left as it was) or ``InternalError`` if
        anything unexpected goes wrong.  Nothing is retried.
        """
        values = candidate.model_dump() if isinstance(candidate, StudentCandidate) else dict(candidate)

        violations = validate_candidate(values)
        if violations:
            logger.info("Rejected registration: invalid fields %s", ", ".join(violations))
            return ValidationError(errors=violations)

        try:
            student = Student(id=values["id"], nombre=values["nombre"], carrera=values["carrera"])
            inserted = self._store.insert(student)
        except Exception:
            logger.exception("Unexpected error registering student %r", values.get("id"))
            return InternalError()

        if not inserted:
            logger.warning("Rejected registration: student %s already exists", student.id)
            return ConflictError(id=student.id)

        logger.info("Registered student %s", student.id)
        return Success(record=student)

    def list_all(self) -> List[Student]:
        """Return every registered student; an empty list if there are none."""
        return self._store.list_all()
