"""Lifecycle hooks for Teacher records."""

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
from academic_records.models.teacher import Teacher

REQUIRED_FIELDS = ("staff_number", "first_name", "last_name", "email")
STAFF_NUMBER_MAX_LENGTH = 20


@registry.before(Event.CREATE, Teacher)
async def before_create_teacher(tx: Transaction, request: HookRequest) -> None:
    """Normalize the staff number and reject it if already registered."""
    validate_required(request.data, REQUIRED_FIELDS)

    staff_number = normalize_identifier(request.data["staff_number"])
    if not staff_number:
        raise MissingFieldsError(["staff_number"])
    if len(staff_number) > STAFF_NUMBER_MAX_LENGTH:
        raise TooLongError(
            f"staff_number cannot exceed {STAFF_NUMBER_MAX_LENGTH} characters.",
            target="staff_number",
            code="STAFF_NUMBER_TOO_LONG",
        )
    request.data["staff_number"] = staff_number

    if await tx.query_one(Teacher, staff_number=staff_number):
        raise DuplicateKeyError(
            f"A teacher with staff number {staff_number} already exists.",
            target="staff_number",
            code="STAFF_NUMBER_EXISTS",
        )
