"""Program plans API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from academic_records.schemas.plan_subject import PlanSubjectResponse
from academic_records.schemas.program_plan import (
    ProgramPlanCreate,
    ProgramPlanResponse,
    ProgramPlanUpdate,
)
from academic_records.services.program_plan_service import ProgramPlanService
from academic_records.utils.dependencies import dependencies

router = APIRouter(
    prefix="/program-plans",
    tags=["Program Plans"],
)


@router.get("")
async def list_program_plans(
    limit: int = Query(default=50, ge=1, le=200, description="Max results"),
    offset: int = Query(default=0, ge=0, description="Results to skip"),
    service: ProgramPlanService = Depends(dependencies.program_plan),
) -> list[ProgramPlanResponse]:
    """List program plans ordered by id."""
    plans = await service.get_all(limit=limit, offset=offset)
    return [ProgramPlanResponse.model_validate(p) for p in plans]


@router.get("/{plan_id}")
async def get_program_plan(
    plan_id: int,
    service: ProgramPlanService = Depends(dependencies.program_plan),
) -> ProgramPlanResponse:
    """Get a program plan by id."""
    plan = await service.get_by_id_or_fail(plan_id)
    return ProgramPlanResponse.model_validate(plan)


@router.get("/{plan_id}/subjects")
async def list_program_plan_subjects(
    plan_id: int,
    service: ProgramPlanService = Depends(dependencies.program_plan),
) -> list[PlanSubjectResponse]:
    """List the subjects of a plan ordered by year and term."""
    plan_subjects = await service.get_subjects(plan_id)
    return [PlanSubjectResponse.model_validate(ps) for ps in plan_subjects]


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_program_plan(
    data: ProgramPlanCreate,
    service: ProgramPlanService = Depends(dependencies.program_plan),
) -> ProgramPlanResponse:
    """Create a program plan, in Draft unless a state is given.

    Raises:
        ParentNotFoundError: If the degree program does not exist.
        OutOfRangeError: If the year or duration is out of range.
        DuplicateKeyError: If the program already has a plan for that year.
    """
    plan = await service.create(data.model_dump(exclude_unset=True))
    return ProgramPlanResponse.model_validate(plan)


@router.patch("/{plan_id}")
async def update_program_plan(
    plan_id: int,
    data: ProgramPlanUpdate,
    service: ProgramPlanService = Depends(dependencies.program_plan),
) -> ProgramPlanResponse:
    """Update a Draft plan, or transition the state of any plan.

    Raises:
        InvalidStateError: If a non-Draft plan gets a change besides state.
    """
    plan = await service.update(plan_id, data.model_dump(exclude_unset=True))
    return ProgramPlanResponse.model_validate(plan)


@router.delete("/{plan_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_program_plan(
    plan_id: int,
    service: ProgramPlanService = Depends(dependencies.program_plan),
) -> None:
    """Delete a Draft plan without subjects."""
    await service.delete(plan_id)
