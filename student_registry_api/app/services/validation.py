"""
Field validation for registration payloads.

The rules are an explicit, ordered table of ``(field, predicate,
message)`` checks.  ``validate_candidate`` evaluates every check, so a
payload missing two fields is told about both.  An absent value fails
both the null and the blank check and therefore reports two messages.
"""

from typing import Any, Callable, Dict, List, Mapping, NamedTuple

FIELDS = ("id", "nombre", "carrera")

UNKNOWN_FIELD_MESSAGE = "Campo no permitido"


def _is_present(value: Any) -> bool:
    return value is not None


def _is_text(value: Any) -> bool:
    return value is None or isinstance(value, str)


def _is_not_blank(value: Any) -> bool:
    if value is None:
        return False
    # Non-string values are reported by the type check only.
    return not isinstance(value, str) or bool(value.strip())


class Check(NamedTuple):
    field: str
    predicate: Callable[[Any], bool]
    message: str


CHECKS = (
    Check("id", _is_present, "El ID no puede ser nulo"),
    Check("id", _is_not_blank, "El ID no puede estar vacío"),
    Check("id", _is_text, "El ID debe ser una cadena de texto"),
    Check("nombre", _is_present, "El Nombre no puede ser nulo"),
    Check("nombre", _is_not_blank, "El Nombre no puede estar vacío"),
    Check("nombre", _is_text, "El Nombre debe ser una cadena de texto"),
    Check("carrera", _is_present, "La carrera no puede ser nulo"),
    Check("carrera", _is_not_blank, "La carrera no puede estar vacío"),
    Check("carrera", _is_text, "La carrera debe ser una cadena de texto"),
)


def validate_candidate(values: Mapping[str, Any]) -> Dict[str, List[str]]:
    """Return violation messages per field; empty when ``values`` is valid.

    Fields appear in ``FIELDS`` order, followed by unknown keys sorted by
    name so that identical payloads always produce identical reports.
    """
    violations: Dict[str, List[str]] = {}
    for check in CHECKS:
        if not check.predicate(values.get(check.field)):
            violations.setdefault(check.field, []).append(check.message)
    for key in sorted(str(k) for k in values if k not in FIELDS):
        violations.setdefault(key, []).append(UNKNOWN_FIELD_MESSAGE)
    return violations
