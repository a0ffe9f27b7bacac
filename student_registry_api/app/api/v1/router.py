"""
Top‑level router for version 1 of the API.

Domain routers are included here under their own prefix.  The registry
currently has a single domain, students, served under ``/estudiantes``.
"""

from fastapi import APIRouter

from .endpoints import students

router = APIRouter()

router.include_router(students.router, prefix="/estudiantes", tags=["estudiantes"])
