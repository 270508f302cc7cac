"""Pending change passed to lifecycle hooks."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from academic_records.exceptions import MissingIdError
from academic_records.hooks.validators import EnumValidator, ModelEnumValidator


@dataclass(frozen=True)
class ByBody:
    """Target id taken from the change payload."""

    id: Any


@dataclass(frozen=True)
class ByPath:
    """Target id taken from the request path."""

    id: Any


RecordRef = Union[ByBody, ByPath]


def resolve_record_ref(
    data: dict[str, Any], path_id: Optional[Any] = None
) -> Optional[RecordRef]:
    """Resolve the id of the record an update or delete targets.

    The payload id wins over the path id.

    Args:
        data: Change payload
        path_id: Id from the request path, if any

    Returns:
        ByBody or ByPath reference, or None when neither carries an id
    """
    body_id = data.get("id")
    if body_id is not None:
        return ByBody(body_id)
    if path_id is not None:
        return ByPath(path_id)
    return None


@dataclass
class HookRequest:
    """A pending CREATE/UPDATE/DELETE as seen by a hook.

    Hooks may mutate ``data`` in place (normalization, defaults); whatever
    is left in it after the hook accepts is what gets written.

    Attributes:
        data: Mutable change payload
        ref: Target record reference for updates and deletes
        enums: Validator for enumerated fields checked by the hooks
    """

    data: dict[str, Any] = field(default_factory=dict)
    ref: Optional[RecordRef] = None
    enums: EnumValidator = field(default_factory=ModelEnumValidator)

    @classmethod
    def for_record(
        cls,
        data: dict[str, Any],
        path_id: Optional[Any] = None,
        enums: Optional[EnumValidator] = None,
    ) -> "HookRequest":
        """Build a request for an update or delete, resolving the target once."""
        request = cls(data=data, ref=resolve_record_ref(data, path_id))
        if enums is not None:
            request.enums = enums
        return request

    def require_id(self, entity: str) -> Any:
        """Return the target id.

        Raises:
            MissingIdError: If no id could be resolved
        """
        if self.ref is None:
            raise MissingIdError(entity)
        return self.ref.id
