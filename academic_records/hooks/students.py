"""Lifecycle hooks for Student records."""

from academic_records.exceptions import (
    DuplicateKeyError,
    MissingFieldsError,
    TooLongError,
)
from academic_records.hooks.normalizers import normalize_identifier
from academic_records.hooks.registry import Event, registry
from academic_records.hooks.request import HookRequest
from academic_records.hooks.transaction import Transaction
from academic_records.hooks.validators import validate_required
from academic_records.models.student import Student

REQUIRED_FIELDS = ("identity_number", "first_name", "last_name")
IDENTITY_NUMBER_MAX_LENGTH = 20


@registry.before(Event.CREATE, Student)
async def before_create_student(tx: Transaction, request: HookRequest) -> None:
    """Normalize the identity number and reject it if already registered."""
    validate_required(request.data, REQUIRED_FIELDS)

    identity_number = normalize_identifier(request.data["identity_number"])
    if not identity_number:
        raise MissingFieldsError(["identity_number"])
    if len(identity_number) > IDENTITY_NUMBER_MAX_LENGTH:
        raise TooLongError(
            f"identity_number cannot exceed {IDENTITY_NUMBER_MAX_LENGTH} characters.",
            target="identity_number",
            code="IDENTITY_NUMBER_TOO_LONG",
        )
    request.data["identity_number"] = identity_number

    if await tx.query_one(Student, identity_number=identity_number):
        raise DuplicateKeyError(
            f"A student with identity number {identity_number} already exists.",
            target="identity_number",
            code="IDENTITY_NUMBER_EXISTS",
        )
