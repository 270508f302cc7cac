"""Plan subjects API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from academic_records.schemas.plan_subject import (
    PlanSubjectCreate,
    PlanSubjectResponse,
    PlanSubjectUpdate,
)
from academic_records.services.plan_subject_service import PlanSubjectService
from academic_records.utils.dependencies import dependencies

router = APIRouter(
    prefix="/plan-subjects",
    tags=["Plan Subjects"],
)


@router.get("")
async def list_plan_subjects(
    limit: int = Query(default=50, ge=1, le=200, description="Max results"),
    offset: int = Query(default=0, ge=0, description="Results to skip"),
    service: PlanSubjectService = Depends(dependencies.plan_subject),
) -> list[PlanSubjectResponse]:
    """List plan subjects ordered by id."""
    plan_subjects = await service.get_all(limit=limit, offset=offset)
    return [PlanSubjectResponse.model_validate(ps) for ps in plan_subjects]


@router.get("/{plan_subject_id}")
async def get_plan_subject(
    plan_subject_id: int,
    service: PlanSubjectService = Depends(dependencies.plan_subject),
) -> PlanSubjectResponse:
    """Get a plan subject by id."""
    plan_subject = await service.get_by_id_or_fail(plan_subject_id)
    return PlanSubjectResponse.model_validate(plan_subject)


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_plan_subject(
    data: PlanSubjectCreate,
    service: PlanSubjectService = Depends(dependencies.plan_subject),
) -> PlanSubjectResponse:
    """Add a subject to a Draft plan.

    Raises:
        ParentNotFoundError: If the plan or subject does not exist.
        InvalidStateError: If the plan is not in Draft.
        OutOfRangeError: If the year exceeds the plan duration.
        InvalidEnumError: If the term is not S1 or S2.
        DuplicateKeyError: If the subject is already in the plan.
    """
    plan_subject = await service.create(data.model_dump(exclude_unset=True))
    return PlanSubjectResponse.model_validate(plan_subject)


@router.patch("/{plan_subject_id}")
async def update_plan_subject(
    plan_subject_id: int,
    data: PlanSubjectUpdate,
    service: PlanSubjectService = Depends(dependencies.plan_subject),
) -> PlanSubjectResponse:
    """Change year, term or state of a plan subject under a Draft plan."""
    plan_subject = await service.update(
        plan_subject_id, data.model_dump(exclude_unset=True)
    )
    return PlanSubjectResponse.model_validate(plan_subject)


@router.delete("/{plan_subject_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_plan_subject(
    plan_subject_id: int,
    service: PlanSubjectService = Depends(dependencies.plan_subject),
) -> None:
    """Remove a subject from a Draft plan."""
    await service.delete(plan_subject_id)
