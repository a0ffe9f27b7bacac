import threading

import pytest
from pydantic import ValidationError

from student_registry_api.app.core.store import StudentStore
from student_registry_api.app.schemas.student import Student


def _student(student_id: str, nombre: str = "Ana", carrera: str = "Sistemas") -> Student:
    return Student(id=student_id, nombre=nombre, carrera=carrera)


def test_empty_store() -> None:
    s = StudentStore()
    assert len(s) == 0
    assert s.list_all() == []
    assert not s.exists("1")
    assert "1" not in s


def test_insert_then_exists() -> None:
    s = StudentStore()
    assert s.insert(_student("1")) is True
    assert s.exists("1")
    assert "1" in s
    assert len(s) == 1


def test_insert_duplicate_returns_false_and_keeps_original() -> None:
    s = StudentStore()
    original = _student("1", nombre="Original")
    assert s.insert(original)
    assert s.insert(_student("1", nombre="Impostor")) is False
    assert s.list_all() == [original]


def test_list_all_preserves_insertion_order() -> None:
    s = StudentStore()
    for sid in ("b", "a", "c"):
        s.insert(_student(sid))
    assert [st.id for st in s.list_all()] == ["b", "a", "c"]


def test_snapshot_is_not_affected_by_later_inserts() -> None:
    s = StudentStore()
    s.insert(_student("1"))
    snapshot = s.list_all()
    s.insert(_student("2"))
    snapshot.clear()
    assert [st.id for st in s.list_all()] == ["1", "2"]


def test_stored_records_cannot_be_mutated() -> None:
    s = StudentStore()
    s.insert(_student("1", nombre="Ana"))
    stored = s.list_all()[0]
    with pytest.raises(ValidationError):
        stored.nombre = "Otra"
    assert s.list_all()[0].nombre == "Ana"


def test_contains_ignores_non_string_keys() -> None:
    s = StudentStore()
    s.insert(_student("1"))
    assert 1 not in s


def test_concurrent_inserts_same_id_only_one_wins() -> None:
    s = StudentStore()
    workers = 32
    barrier = threading.Barrier(workers)
    results = []
    results_lock = threading.Lock()

    def worker(n: int) -> None:
        barrier.wait()
        ok = s.insert(_student("same", nombre=f"worker-{n}"))
        with results_lock:
            results.append(ok)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 1
    assert results.count(False) == workers - 1
    assert len(s) == 1
