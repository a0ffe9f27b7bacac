"""
Pydantic schemas for student records.

``Student`` is the stored, immutable record.  ``StudentCandidate`` is the
raw registration payload: it accepts any value for each field (and any
extra keys) so that every format problem reaches the validation gate in
``services.validation`` and is reported together, instead of being
rejected piecemeal by request parsing.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Student(BaseModel):
    """A registered student."""

    id: str = Field(..., description="Unique student identifier", examples=["000125354"])
    nombre: str = Field(..., description="Full name", examples=["Fito Paez"])
    carrera: str = Field(..., description="Academic program", examples=["Ingeniería de Sonido"])

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }


class StudentCandidate(BaseModel):
    """Registration payload as submitted by the client.

    Values are deliberately untyped; see ``services.validation`` for the
    rules applied to them.
    """

    id: Optional[Any] = Field(None, description="Unique student identifier", examples=["000125354"])
    nombre: Optional[Any] = Field(None, description="Full name", examples=["Fito Paez"])
    carrera: Optional[Any] = Field(None, description="Academic program", examples=["Ingeniería de Sonido"])

    model_config = {
        "extra": "allow",
    }


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    status: int
    error: str
    message: str
    errors: Optional[Dict[str, List[str]]] = Field(
        None, description="Violation messages per field (validation failures only)"
    )
