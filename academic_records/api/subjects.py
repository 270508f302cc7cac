"""Subjects API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from academic_records.schemas.subject import (
    SubjectCreate,
    SubjectResponse,
    SubjectUpdate,
)
from academic_records.services.subject_service import SubjectService
from academic_records.utils.dependencies import dependencies

router = APIRouter(
    prefix="/subjects",
    tags=["Subjects"],
)


@router.get("")
async def search_subjects(
    search: str = Query(default="", description="Search term for subject name"),
    limit: int = Query(default=10, ge=1, le=50, description="Max results"),
    service: SubjectService = Depends(dependencies.subject),
) -> list[SubjectResponse]:
    """Search subjects by name.

    Args:
        search: Search term to filter by name (case-insensitive).
        limit: Maximum number of results to return.
        service: SubjectService instance.

    Returns:
        List of matching subjects ordered by name.
    """
    subjects = await service.search(search=search, limit=limit)
    return [SubjectResponse.model_validate(s) for s in subjects]


@router.get("/{subject_id}")
async def get_subject(
    subject_id: int,
    service: SubjectService = Depends(dependencies.subject),
) -> SubjectResponse:
    """Get a subject by id."""
    subject = await service.get_by_id_or_fail(subject_id)
    return SubjectResponse.model_validate(subject)


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_subject(
    data: SubjectCreate,
    service: SubjectService = Depends(dependencies.subject),
) -> SubjectResponse:
    """Create a new subject.

    Args:
        data: Subject creation data.
        service: SubjectService instance.

    Returns:
        Created subject with normalized name.

    Raises:
        DuplicateKeyError: If a subject with the same normalized name exists.
    """
    subject = await service.create(data.model_dump(exclude_unset=True))
    return SubjectResponse.model_validate(subject)


@router.patch("/{subject_id}")
async def update_subject(
    subject_id: int,
    data: SubjectUpdate,
    service: SubjectService = Depends(dependencies.subject),
) -> SubjectResponse:
    """Rename a subject."""
    subject = await service.update(subject_id, data.model_dump(exclude_unset=True))
    return SubjectResponse.model_validate(subject)


@router.delete("/{subject_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_subject(
    subject_id: int,
    service: SubjectService = Depends(dependencies.subject),
) -> None:
    """Delete a subject that no plan uses.

    Raises:
        InUseError: If any plan subject references it.
    """
    await service.delete(subject_id)
