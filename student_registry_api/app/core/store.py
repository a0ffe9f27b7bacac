"""
In-memory student store.

Records live in a plain dict guarded by a single mutex.  Data is lost on
restart.  The store is created by ``create_app`` and handed to the
service, so every application (and every test) owns an independent
instance.
"""

import functools
import logging
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

from student_registry_api.app.schemas.student import Student

logger = logging.getLogger(__name__)


def locked_method(method: Callable[..., Any]) -> Callable[..., Any]:
    """Run the decorated method while holding ``self._lock``."""

    @functools.wraps(method)
    def wrapper(self: "StudentStore", *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class StudentStore:
    """Thread-safe mapping of student id to ``Student``.

    There is no update or delete: a record, once inserted, stays as it
    was until the process exits.  ``Student`` instances are frozen, so
    handing them out does not give callers a way to alter stored state.
    """

    def __init__(self, *, lock: Optional[Lock] = None) -> None:
        self._lock = lock or Lock()
        self._records: Dict[str, Student] = {}

    @locked_method
    def exists(self, student_id: str) -> bool:
        return student_id in self._records

    @locked_method
    def insert(self, student: Student) -> bool:
        """Store ``student`` unless its id is taken.

        Returns ``False``, leaving the store untouched, if a record with
        the same id already exists.
        """
        if student.id in self._records:
            return False
        self._records[student.id] = student
        logger.debug("Stored student %s (%d total)", student.id, len(self._records))
        return True

    @locked_method
    def list_all(self) -> List[Student]:
        """Snapshot of all records in insertion order."""
        return list(self._records.values())

    @locked_method
    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, student_id: object) -> bool:
        return isinstance(student_id, str) and self.exists(student_id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} records)"
