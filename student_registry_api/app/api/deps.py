"""
FastAPI dependencies shared by the v1 endpoints.
"""

from fastapi import Request

from student_registry_api.app.services.student_service import StudentService


def get_student_service(request: Request) -> StudentService:
    """Return the service attached to the running application by ``create_app``."""
    return request.app.state.student_service
