"""Lifecycle hooks for Subject records."""

from academic_records.exceptions import (
    DuplicateKeyError,
    EmptyFieldError,
    InUseError,
    MissingFieldsError,
    TooLongError,
)
from academic_records.hooks.normalizers import normalize_name
from academic_records.hooks.registry import Event, registry
from academic_records.hooks.request import HookRequest
from academic_records.hooks.transaction import Transaction, fetch_target
from academic_records.hooks.validators import validate_not_null
from academic_records.models.plan_subject import PlanSubject
from academic_records.models.subject import Subject

NAME_MAX_LENGTH = 100


def _clean_name(value: object) -> str:
    """Normalize a subject name and check it is non-empty and short enough."""
    name = normalize_name(value)
    if not name:
        raise EmptyFieldError(
            "name cannot be empty.", target="name", code="SUBJECT_NAME_EMPTY"
        )
    if len(name) > NAME_MAX_LENGTH:
        raise TooLongError(
            f"name cannot exceed {NAME_MAX_LENGTH} characters.",
            target="name",
            code="SUBJECT_NAME_TOO_LONG",
        )
    return name


def _duplicate_name(name: str) -> DuplicateKeyError:
    return DuplicateKeyError(
        f"A subject named {name!r} already exists.",
        target="name",
        code="SUBJECT_DUPLICATE",
    )


@registry.before(Event.CREATE, Subject)
async def before_create_subject(tx: Transaction, request: HookRequest) -> None:
    if request.data.get("name") is None:
        raise MissingFieldsError(["name"])

    name = _clean_name(request.data["name"])
    if await tx.query_one(Subject, name=name):
        raise _duplicate_name(name)

    request.data["name"] = name


@registry.before(Event.UPDATE, Subject)
async def before_update_subject(tx: Transaction, request: HookRequest) -> None:
    subject = await fetch_target(tx, Subject, request)
    validate_not_null(request.data, ("name",))

    if "name" in request.data:
        name = _clean_name(request.data["name"])
        existing = await tx.query_one(Subject, name=name)
        if existing is not None and existing.id != subject.id:
            raise _duplicate_name(name)
        request.data["name"] = name


@registry.before(Event.DELETE, Subject)
async def before_delete_subject(tx: Transaction, request: HookRequest) -> None:
    subject = await fetch_target(tx, Subject, request)

    if await tx.query_one(PlanSubject, subject_id=subject.id):
        raise InUseError(
            "Cannot delete: the subject is used in at least one plan.",
            target="id",
            code="SUBJECT_IN_USE",
        )
