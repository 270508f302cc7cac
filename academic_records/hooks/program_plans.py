"""Lifecycle hooks for ProgramPlan records.

A plan is editable only while in Draft. Outside Draft the only accepted
change is a state transition. Deleting requires Draft and no PlanSubject
rows.
"""

from datetime import date
from typing import Any

from academic_records.exceptions import (
    DuplicateKeyError,
    HasChildrenError,
    ImmutableFieldError,
    InvalidStateError,
    ParentNotFoundError,
)
from academic_records.hooks.registry import Event, registry
from academic_records.hooks.request import HookRequest
from academic_records.hooks.transaction import Transaction, fetch_target
from academic_records.hooks.validators import (
    validate_int_range,
    validate_not_null,
    validate_required,
)
from academic_records.models.degree_program import DegreeProgram
from academic_records.models.plan_subject import PlanSubject
from academic_records.models.program_plan import PlanState, ProgramPlan

REQUIRED_FIELDS = ("program_id", "effective_year", "duration_years")
NON_NULL_FIELDS = REQUIRED_FIELDS + ("state",)
MIN_EFFECTIVE_YEAR = 2000
MIN_DURATION_YEARS = 1
MAX_DURATION_YEARS = 10

# Fields a non-Draft plan still accepts in an update
STATE_TRANSITION_FIELDS = frozenset({"id", "state"})


def current_year() -> int:
    return date.today().year


def state_label(state: Any) -> str:
    return getattr(state, "value", state)


def validate_effective_year(value: Any) -> None:
    validate_int_range(
        value,
        MIN_EFFECTIVE_YEAR,
        current_year() + 1,
        field="effective_year",
        code="EFFECTIVE_YEAR_OUT_OF_RANGE",
    )


def validate_duration_years(value: Any) -> None:
    validate_int_range(
        value,
        MIN_DURATION_YEARS,
        MAX_DURATION_YEARS,
        field="duration_years",
        code="DURATION_OUT_OF_RANGE",
    )


async def _ensure_unique_year(tx: Transaction, program_id: Any, year: int) -> None:
    if await tx.query_one(ProgramPlan, program_id=program_id, effective_year=year):
        raise DuplicateKeyError(
            f"A plan for this degree program already takes effect in {year}.",
            target="effective_year",
            code="PLAN_DUPLICATE_YEAR",
        )


def ensure_draft(plan: Any, target: str = "plan_id") -> None:
    """Reject changes under a plan that left the Draft state."""
    if plan.state != PlanState.DRAFT:
        raise InvalidStateError(
            f"Cannot modify a plan in state {state_label(plan.state)}.",
            target=target,
            code="PLAN_NOT_EDITABLE",
        )


@registry.before(Event.CREATE, ProgramPlan)
async def before_create_program_plan(tx: Transaction, request: HookRequest) -> None:
    data = request.data
    validate_required(data, REQUIRED_FIELDS)

    program_id = data["program_id"]
    if await tx.query_one(DegreeProgram, id=program_id) is None:
        raise ParentNotFoundError(
            "Degree program not found.",
            target="program_id",
            code="PROGRAM_NOT_FOUND",
        )

    validate_effective_year(data["effective_year"])
    validate_duration_years(data["duration_years"])

    await _ensure_unique_year(tx, program_id, data["effective_year"])

    if not data.get("state"):
        data["state"] = PlanState.DRAFT


@registry.before(Event.UPDATE, ProgramPlan)
async def before_update_program_plan(tx: Transaction, request: HookRequest) -> None:
    plan = await fetch_target(tx, ProgramPlan, request)
    data = request.data
    validate_not_null(data, NON_NULL_FIELDS)

    if plan.state != PlanState.DRAFT:
        changed = [
            key
            for key, value in data.items()
            if key not in STATE_TRANSITION_FIELDS and getattr(plan, key, None) != value
        ]
        if changed:
            ensure_draft(plan, target=changed[0])

    if "program_id" in data and data["program_id"] != plan.program_id:
        raise ImmutableFieldError(
            "The degree program of a plan cannot be changed.",
            target="program_id",
            code="PLAN_PROGRAM_IMMUTABLE",
        )

    if "effective_year" in data:
        year = data["effective_year"]
        validate_effective_year(year)
        if year != plan.effective_year:
            await _ensure_unique_year(tx, plan.program_id, year)

    if "duration_years" in data:
        validate_duration_years(data["duration_years"])


@registry.before(Event.DELETE, ProgramPlan)
async def before_delete_program_plan(tx: Transaction, request: HookRequest) -> None:
    plan = await fetch_target(tx, ProgramPlan, request)

    if plan.state != PlanState.DRAFT:
        raise InvalidStateError(
            f"Cannot delete a plan in state {state_label(plan.state)}.",
            target="id",
            code="PLAN_NOT_DELETABLE",
        )

    if await tx.query_one(PlanSubject, plan_id=plan.id):
        raise HasChildrenError(
            "Cannot delete: the plan has subjects.",
            target="id",
            code="PLAN_HAS_CHILDREN",
        )
