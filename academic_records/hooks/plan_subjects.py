"""Lifecycle hooks for PlanSubject records.

Every change requires the owning plan to be in Draft. ``year_in_plan`` is
bounded by the plan's ``duration_years``.
"""

from typing import Any

from academic_records.exceptions import (
    DuplicateKeyError,
    ImmutableFieldError,
    InvalidEnumError,
    ParentNotFoundError,
    UnknownFieldError,
)
from academic_records.hooks.program_plans import ensure_draft
from academic_records.hooks.registry import Event, registry
from academic_records.hooks.request import HookRequest
from academic_records.hooks.transaction import Transaction, fetch_target
from academic_records.hooks.validators import (
    validate_int_range,
    validate_not_null,
    validate_required,
)
from academic_records.models.plan_subject import PlanSubject, PlanSubjectState, Term
from academic_records.models.program_plan import ProgramPlan
from academic_records.models.subject import Subject

REQUIRED_FIELDS = ("plan_id", "subject_id", "year_in_plan", "term")
NON_NULL_FIELDS = REQUIRED_FIELDS + ("state",)
EDITABLE_FIELDS = frozenset(
    {"year_in_plan", "term", "state", "plan_id", "subject_id", "id"}
)
IMMUTABLE_REFERENCES = (
    ("plan_id", "The plan of a plan subject cannot be changed; delete and re-create it."),
    (
        "subject_id",
        "The subject of a plan subject cannot be changed; delete and re-create it.",
    ),
)


async def _load_plan(tx: Transaction, plan_id: Any) -> Any:
    plan = await tx.query_one(ProgramPlan, id=plan_id)
    if plan is None:
        raise ParentNotFoundError(
            "Plan not found.", target="plan_id", code="PLAN_NOT_FOUND"
        )
    return plan


def _validate_year_in_plan(value: Any, plan: Any) -> None:
    validate_int_range(
        value, 1, plan.duration_years, field="year_in_plan", code="YEAR_OUT_OF_RANGE"
    )


def _validate_term(request: HookRequest, value: Any) -> None:
    if not request.enums.is_valid("term", value):
        allowed = ", ".join(term.value for term in Term)
        raise InvalidEnumError(
            f"Invalid term. Use one of: {allowed}.",
            target="term",
            code="TERM_INVALID",
        )


@registry.before(Event.CREATE, PlanSubject)
async def before_create_plan_subject(tx: Transaction, request: HookRequest) -> None:
    data = request.data
    validate_required(data, REQUIRED_FIELDS)

    plan = await _load_plan(tx, data["plan_id"])
    ensure_draft(plan)

    if await tx.query_one(Subject, id=data["subject_id"]) is None:
        raise ParentNotFoundError(
            "Subject not found.", target="subject_id", code="SUBJECT_NOT_FOUND"
        )

    _validate_year_in_plan(data["year_in_plan"], plan)
    _validate_term(request, data["term"])

    if await tx.query_one(
        PlanSubject, plan_id=data["plan_id"], subject_id=data["subject_id"]
    ):
        raise DuplicateKeyError(
            "The subject is already part of this plan.",
            target="subject_id",
            code="PLAN_SUBJECT_DUPLICATE",
        )

    if not data.get("state"):
        data["state"] = PlanSubjectState.ACTIVE


@registry.before(Event.UPDATE, PlanSubject)
async def before_update_plan_subject(tx: Transaction, request: HookRequest) -> None:
    """Allow year, term and state edits while the owning plan is Draft.

    ``plan_id`` and ``subject_id`` may be resent (full replacement payloads)
    but must match the stored values. ``term`` is only checked when sent.
    """
    current = await fetch_target(tx, PlanSubject, request)
    data = request.data

    plan = await _load_plan(tx, current.plan_id)
    ensure_draft(plan)
    validate_not_null(data, NON_NULL_FIELDS)

    if "term" in data:
        _validate_term(request, data["term"])

    for field, message in IMMUTABLE_REFERENCES:
        if field in data and data[field] != getattr(current, field):
            raise ImmutableFieldError(
                message, target=field, code="PLAN_SUBJECT_REFERENCE_IMMUTABLE"
            )

    for field in data:
        if field not in EDITABLE_FIELDS:
            raise UnknownFieldError(
                f"Field is not editable: {field}",
                target=field,
                code="FIELD_NOT_EDITABLE",
            )

    if "year_in_plan" in data:
        _validate_year_in_plan(data["year_in_plan"], plan)


@registry.before(Event.DELETE, PlanSubject)
async def before_delete_plan_subject(tx: Transaction, request: HookRequest) -> None:
    current = await fetch_target(tx, PlanSubject, request)
    plan = await _load_plan(tx, current.plan_id)
    ensure_draft(plan)
