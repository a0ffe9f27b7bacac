"""
Translation of registry outcomes into HTTP responses.

``to_response`` is the single place where an outcome from the service
layer becomes a status code and a JSON body.  It is a pure function:
the same outcome always yields the same response, so bodies carry no
timestamps or request-specific data.
"""

from http import HTTPStatus
from typing import Dict, List, Optional

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from student_registry_api.app.core.errors import (
    ConflictError,
    InternalError,
    Outcome,
    Success,
    ValidationError,
)
from student_registry_api.app.schemas.student import ErrorResponse
from student_registry_api.app.services.validation import FIELDS, UNKNOWN_FIELD_MESSAGE

BODY_FIELD = "body"

# Messages for request bodies that never reach the validation gate.
_BODY_MESSAGES = {
    "missing": "El cuerpo de la petición es obligatorio",
    "json_invalid": "El cuerpo de la petición no es un JSON válido",
}
_BODY_DEFAULT_MESSAGE = "El cuerpo de la petición debe ser un objeto JSON"


def error_body(status_code: int, message: str, errors: Optional[Dict[str, List[str]]] = None) -> dict:
    """Build the JSON body shared by every failure response."""
    body = ErrorResponse(
        status=int(status_code),
        error=HTTPStatus(status_code).phrase,
        message=message,
        errors=errors,
    )
    return body.model_dump(exclude_none=True)


def to_response(outcome: Outcome) -> JSONResponse:
    """Map an outcome from ``StudentService.register`` to a response.

    ================  ======  ==========================================
    outcome           status  body
    ================  ======  ==========================================
    Success           201     the stored record
    ValidationError   400     status, error, message, errors per field
    ConflictError     409     status, error, message naming the id
    InternalError     500     status, error, generic message
    ================  ======  ==========================================
    """
    if isinstance(outcome, Success):
        return JSONResponse(status_code=HTTPStatus.CREATED, content=outcome.record.model_dump())
    if isinstance(outcome, ValidationError):
        status_code = HTTPStatus.BAD_REQUEST
        content = error_body(status_code, outcome.message, outcome.errors)
    elif isinstance(outcome, ConflictError):
        status_code = HTTPStatus.CONFLICT
        content = error_body(status_code, outcome.message)
    elif isinstance(outcome, InternalError):
        status_code = HTTPStatus.INTERNAL_SERVER_ERROR
        content = error_body(status_code, outcome.message)
    else:
        raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")
    return JSONResponse(status_code=status_code, content=content)


def request_error_to_outcome(exc: RequestValidationError) -> ValidationError:
    """Convert a FastAPI request parsing error into a ``ValidationError``.

    Only malformed bodies end up here (invalid JSON, a body that is not
    an object, no body at all): field values themselves are untyped in
    ``StudentCandidate`` and are checked by the service.
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part != BODY_FIELD]
        field = str(loc[0]) if loc and isinstance(loc[0], str) else BODY_FIELD
        if field == BODY_FIELD:
            message = _BODY_MESSAGES.get(error.get("type", ""), _BODY_DEFAULT_MESSAGE)
        elif field not in FIELDS:
            message = UNKNOWN_FIELD_MESSAGE
        else:
            message = str(error.get("msg", _BODY_DEFAULT_MESSAGE))
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return ValidationError(errors=errors)
