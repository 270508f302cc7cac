"""Application exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: int):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class DatabaseConnectionError(ModelError):
    """Raised when database connection fails."""


class InvalidFilterError(ModelError):
    """Raised when invalid filter is provided."""


class RuleViolation(AppError):
    """Base exception for a business rule rejecting a pending change.

    Subclasses fix the ``kind`` and HTTP-equivalent ``status_code``; each
    instance carries the user-facing message and the structured metadata
    (``target`` field and machine-readable ``code``) used by clients to
    highlight the offending field.

    Attributes:
        kind: Error taxonomy name (e.g. "DuplicateKey").
        status_code: HTTP status equivalent.
        message: Human readable message.
        target: Name of the offending field, if any.
        code: Machine readable error code, if any.
    """

    kind: str = "RuleViolation"
    status_code: int = 400

    def __init__(
        self,
        message: str,
        target: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.message = message
        self.target = target
        self.code = code
        super().__init__(message)


class MissingFieldsError(RuleViolation):
    """Raised when one or more required fields are absent or blank."""

    kind = "MissingFields"

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required fields: {', '.join(missing)}",
            target=missing[0],
            code="MISSING_FIELDS",
        )


class MissingIdError(RuleViolation):
    """Raised when an update or delete cannot resolve its target id."""

    kind = "MissingId"

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"Missing {entity} id.", target="id", code="MISSING_ID")


class InvalidFormatError(RuleViolation):
    """Raised when a value fails a format or length check."""

    kind = "InvalidFormat"


class OutOfRangeError(RuleViolation):
    """Raised when a numeric value is not an integer within its range."""

    kind = "OutOfRange"


class InvalidEnumError(RuleViolation):
    """Raised when a value is not one of the enumerated values."""

    kind = "InvalidEnum"


class EmptyFieldError(RuleViolation):
    """Raised when a value is empty after normalization."""

    kind = "EmptyField"


class TooLongError(RuleViolation):
    """Raised when a value exceeds its maximum length."""

    kind = "TooLong"


class ImmutableFieldError(RuleViolation):
    """Raised on an attempt to change a field fixed after creation."""

    kind = "ImmutableField"


class UnknownFieldError(RuleViolation):
    """Raised when an update payload has a field outside the allow-list."""

    kind = "UnknownField"


class InvalidStateError(RuleViolation):
    """Raised when an owning record is not in the required state."""

    kind = "InvalidState"


class InUseError(RuleViolation):
    """Raised when a delete is blocked by referencing records."""

    kind = "InUse"


class HasChildrenError(RuleViolation):
    """Raised when a delete is blocked by child records."""

    kind = "HasChildren"


class NotFoundError(RuleViolation):
    """Raised when the targeted record does not exist."""

    kind = "NotFound"
    status_code = 404


class ParentNotFoundError(RuleViolation):
    """Raised when a referenced parent record does not exist."""

    kind = "ParentNotFound"
    status_code = 404


class DuplicateKeyError(RuleViolation):
    """Raised when a natural or composite key is already taken."""

    kind = "DuplicateKey"
    status_code = 409


class ConstraintViolationError(RuleViolation):
    """Raised when the database rejects a value no rule caught.

    Covers NOT NULL, foreign key and check constraints, and values the
    column type cannot hold. Unique violations raise ``DuplicateKeyError``.
    """

    kind = "ConstraintViolation"
