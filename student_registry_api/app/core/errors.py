"""
Outcome types for registry operations.

Business failures are returned, not raised: ``StudentService.register``
yields exactly one of ``Success``, ``ValidationError``, ``ConflictError``
or ``InternalError``.  Translating an outcome into an HTTP response is
the job of ``api.responses.to_response``; nothing in this module knows
about the transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

from student_registry_api.app.schemas.student import Student

VALIDATION_MESSAGE = "Error de validación"
INTERNAL_MESSAGE = "Error interno del servidor"


@dataclass(frozen=True)
class Success:
    """The record was stored; ``record`` is exactly what was submitted."""

    record: Student


@dataclass(frozen=True)
class ValidationError:
    """One or more fields are absent, blank or malformed.

    ``errors`` maps each offending field to its violation messages, in
    the order the checks were evaluated.
    """

    errors: Dict[str, List[str]] = field(default_factory=dict)
    message: str = VALIDATION_MESSAGE


@dataclass(frozen=True)
class ConflictError:
    """A student with identifier ``id`` is already registered."""

    id: str

    @property
    def message(self) -> str:
        return f"El estudiante con ID {self.id} ya existe"


@dataclass(frozen=True)
class InternalError:
    """Unclassified failure.  Carries no internal detail by construction."""

    message: str = INTERNAL_MESSAGE


Failure = Union[ValidationError, ConflictError, InternalError]
Outcome = Union[Success, ValidationError, ConflictError, InternalError]
