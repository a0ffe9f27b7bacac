"""
Student endpoints for API v1.

Two routes are exposed: register a student and list every registered
student.  There is no update, delete, lookup by id or pagination.  The
handlers only call ``StudentService`` and hand its outcome to
``to_response``; status codes and error bodies are decided there.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from student_registry_api.app.api.deps import get_student_service
from student_registry_api.app.api.responses import to_response
from student_registry_api.app.schemas.student import ErrorResponse, Student, StudentCandidate
from student_registry_api.app.services.student_service import StudentService

router = APIRouter()


@router.post(
    "",
    response_model=Student,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Missing or blank fields"},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Student id already registered"},
    },
)
async def register_student(
    candidate: StudentCandidate = Body(..., description="Student to register"),
    service: StudentService = Depends(get_student_service),
) -> JSONResponse:
    """Register a new student.

    Every field (``id``, ``nombre``, ``carrera``) is required and must
    not be blank; all violations are reported at once with HTTP 400.
    Registering an id that already exists returns HTTP 409 and leaves
    the stored student unchanged.
    """
    return to_response(service.register(candidate))


@router.get("", response_model=List[Student])
async def list_students(service: StudentService = Depends(get_student_service)) -> List[Student]:
    """Return all registered students (an empty list when there are none)."""
    return service.list_all()
