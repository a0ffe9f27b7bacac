import pytest
from fastapi.testclient import TestClient

from student_registry_api.app.core.store import StudentStore
from student_registry_api.app.main import create_app
from student_registry_api.app.services.student_service import StudentService

STUDENTS_URL = "/api/v1/estudiantes"

FITO = {"id": "000125354", "nombre": "Fito Paez", "carrera": "Ingeniería de Sonido"}


@pytest.fixture
def store() -> StudentStore:
    return StudentStore()


@pytest.fixture
def service(store: StudentStore) -> StudentService:
    return StudentService(store)


@pytest.fixture
def client(service: StudentService) -> TestClient:
    return TestClient(create_app(service))
