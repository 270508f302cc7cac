"""Degree programs API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from academic_records.schemas.degree_program import (
    DegreeProgramCreate,
    DegreeProgramResponse,
    DegreeProgramUpdate,
)
from academic_records.services.degree_program_service import DegreeProgramService
from academic_records.utils.dependencies import dependencies

router = APIRouter(
    prefix="/degree-programs",
    tags=["Degree Programs"],
)


@router.get("")
async def list_degree_programs(
    limit: int = Query(default=50, ge=1, le=200, description="Max results"),
    offset: int = Query(default=0, ge=0, description="Results to skip"),
    service: DegreeProgramService = Depends(dependencies.degree_program),
) -> list[DegreeProgramResponse]:
    """List degree programs ordered by id."""
    programs = await service.get_all(limit=limit, offset=offset)
    return [DegreeProgramResponse.model_validate(p) for p in programs]


@router.get("/{program_id}")
async def get_degree_program(
    program_id: int,
    service: DegreeProgramService = Depends(dependencies.degree_program),
) -> DegreeProgramResponse:
    """Get a degree program by id."""
    program = await service.get_by_id_or_fail(program_id)
    return DegreeProgramResponse.model_validate(program)


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_degree_program(
    data: DegreeProgramCreate,
    service: DegreeProgramService = Depends(dependencies.degree_program),
) -> DegreeProgramResponse:
    """Create a degree program.

    Raises:
        InvalidFormatError: If the code or name is malformed.
        DuplicateKeyError: If the normalized code is taken.
    """
    program = await service.create(data.model_dump(exclude_unset=True))
    return DegreeProgramResponse.model_validate(program)


@router.patch("/{program_id}")
async def update_degree_program(
    program_id: int,
    data: DegreeProgramUpdate,
    service: DegreeProgramService = Depends(dependencies.degree_program),
) -> DegreeProgramResponse:
    """Update name or type of a degree program; the code is fixed."""
    program = await service.update(program_id, data.model_dump(exclude_unset=True))
    return DegreeProgramResponse.model_validate(program)


@router.delete("/{program_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_degree_program(
    program_id: int,
    service: DegreeProgramService = Depends(dependencies.degree_program),
) -> None:
    """Delete a degree program without plans.

    Raises:
        InUseError: If any program plan references it.
    """
    await service.delete(program_id)
