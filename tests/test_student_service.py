from typing import List

from student_registry_api.app.core.errors import ConflictError, InternalError, Success, ValidationError
from student_registry_api.app.core.store import StudentStore
from student_registry_api.app.schemas.student import Student, StudentCandidate
from student_registry_api.app.services.student_service import StudentService

from .conftest import FITO


class ExplodingStore(StudentStore):
    def insert(self, student: Student) -> bool:
        raise RuntimeError("disk on fire")


class RecordingStore(StudentStore):
    def __init__(self) -> None:
        super().__init__()
        self.calls: List[str] = []

    def insert(self, student: Student) -> bool:
        self.calls.append(student.id)
        return super().insert(student)


def test_register_returns_record_unchanged(service: StudentService) -> None:
    outcome = service.register(StudentCandidate(**FITO))
    assert isinstance(outcome, Success)
    assert outcome.record.model_dump() == FITO


def test_register_accepts_plain_mapping(service: StudentService) -> None:
    outcome = service.register(dict(FITO))
    assert isinstance(outcome, Success)


def test_duplicate_id_conflicts_and_keeps_original(service: StudentService) -> None:
    service.register(FITO)
    outcome = service.register({"id": FITO["id"], "nombre": "Charly Garcia", "carrera": "Musica"})
    assert isinstance(outcome, ConflictError)
    assert outcome.id == "000125354"
    assert "000125354" in outcome.message
    assert [s.model_dump() for s in service.list_all()] == [FITO]


def test_duplicate_rejection_is_idempotent(service: StudentService) -> None:
    service.register(FITO)
    before = service.list_all()
    for _ in range(5):
        outcome = service.register(FITO)
        assert isinstance(outcome, ConflictError)
        assert outcome.message == "El estudiante con ID 000125354 ya existe"
    assert service.list_all() == before


def test_validation_failure_never_touches_store() -> None:
    store = RecordingStore()
    svc = StudentService(store)
    outcome = svc.register({"id": "123"})
    assert isinstance(outcome, ValidationError)
    assert set(outcome.errors) == {"nombre", "carrera"}
    assert store.calls == []
    assert svc.list_all() == []


def test_validation_failure_lists_all_blank_fields(service: StudentService) -> None:
    outcome = service.register(StudentCandidate(id="   ", nombre="", carrera="   "))
    assert isinstance(outcome, ValidationError)
    assert list(outcome.errors) == ["id", "nombre", "carrera"]
    assert outcome.message == "Error de validación"


def test_validation_failure_for_existing_id_is_not_conflict(service: StudentService) -> None:
    service.register(FITO)
    outcome = service.register({"id": FITO["id"], "nombre": "", "carrera": "Musica"})
    assert isinstance(outcome, ValidationError)
    assert service.list_all()[0].nombre == "Fito Paez"


def test_extra_fields_are_rejected(service: StudentService) -> None:
    outcome = service.register(StudentCandidate(**FITO, edad=30))
    assert isinstance(outcome, ValidationError)
    assert outcome.errors == {"edad": ["Campo no permitido"]}
    assert service.list_all() == []


def test_store_failure_becomes_internal_error(caplog) -> None:
    svc = StudentService(ExplodingStore())
    outcome = svc.register(FITO)
    assert isinstance(outcome, InternalError)
    assert "disk on fire" not in outcome.message
    assert "Unexpected error registering student" in caplog.text


def test_list_all_empty(service: StudentService) -> None:
    assert service.list_all() == []


def test_list_all_contains_exactly_accepted_records(service: StudentService) -> None:
    accepted = []
    for i in range(10):
        payload = {"id": f"id-{i}", "nombre": f"Nombre {i}", "carrera": "Sistemas"}
        assert isinstance(service.register(payload), Success)
        accepted.append(payload)
        service.register(payload)
        service.register({"id": f"id-{i}-bad", "nombre": " "})
    assert [s.model_dump() for s in service.list_all()] == accepted


def test_service_exposes_injected_store(store: StudentStore, service: StudentService) -> None:
    assert service.store is store
