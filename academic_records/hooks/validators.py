"""Field-level checks shared by every entity rule set."""

import enum
from typing import Any, Iterable, Mapping, Optional, Protocol, Type

from academic_records.exceptions import MissingFieldsError, OutOfRangeError
from academic_records.models import ProgramType, Term


def is_blank(value: Any) -> bool:
    """Whether a value counts as missing: None, or empty once stringified."""
    return value is None or str(value).strip() == ""


def validate_required(data: Mapping[str, Any], field_names: Iterable[str]) -> None:
    """Reject the change if any of ``field_names`` is absent or blank.

    All missing fields are reported at once; the first one is the target.

    Raises:
        MissingFieldsError: If at least one field is missing
    """
    missing = [name for name in field_names if is_blank(data.get(name))]
    if missing:
        raise MissingFieldsError(missing)


def validate_not_null(data: Mapping[str, Any], field_names: Iterable[str]) -> None:
    """Reject an update that sets any of ``field_names`` to None.

    Fields absent from ``data`` are left alone.

    Raises:
        MissingFieldsError: If a supplied field is None
    """
    missing = [name for name in field_names if name in data and data[name] is None]
    if missing:
        raise MissingFieldsError(missing)


def is_integer(value: Any) -> bool:
    """Whether a value is an integral number (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_int_range(
    value: Any,
    low: int,
    high: int,
    *,
    field: str,
    code: Optional[str] = None,
) -> None:
    """Reject a value that is not an integer within ``[low, high]``.

    Raises:
        OutOfRangeError: If the value is not integral or out of bounds
    """
    if not is_integer(value) or not low <= value <= high:
        raise OutOfRangeError(
            f"{field} must be an integer between {low} and {high}.",
            target=field,
            code=code,
        )


class EnumValidator(Protocol):
    """Decides whether a value is allowed for an enumerated field."""

    def is_valid(self, field_name: str, value: Any) -> bool:
        """Return True if ``value`` is an allowed value of ``field_name``."""
        ...


class ModelEnumValidator:
    """EnumValidator backed by the enums declared on the models.

    Fields without a declared enum accept any value.
    """

    FIELD_ENUMS: dict[str, Type[enum.Enum]] = {
        "term": Term,
        "type": ProgramType,
    }

    def __init__(self, field_enums: Optional[dict[str, Type[enum.Enum]]] = None):
        self.field_enums = field_enums if field_enums is not None else self.FIELD_ENUMS

    def is_valid(self, field_name: str, value: Any) -> bool:
        enum_cls = self.field_enums.get(field_name)
        if enum_cls is None:
            return True
        return any(value == member.value for member in enum_cls)
