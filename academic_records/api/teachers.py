"""Teachers API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from academic_records.schemas.teacher import TeacherCreate, TeacherResponse
from academic_records.services.teacher_service import TeacherService
from academic_records.utils.dependencies import dependencies

router = APIRouter(
    prefix="/teachers",
    tags=["Teachers"],
)


@router.get("")
async def search_teachers(
    search: str = Query(default="", description="Search term for teacher name"),
    limit: int = Query(default=10, ge=1, le=50, description="Max results"),
    service: TeacherService = Depends(dependencies.teacher),
) -> list[TeacherResponse]:
    """Search teachers by name.

    Args:
        search: Search term to filter by first or last name (case-insensitive).
        limit: Maximum number of results to return.
        service: TeacherService instance.

    Returns:
        List of matching teachers ordered by last name.
    """
    teachers = await service.search(search=search, limit=limit)
    return [TeacherResponse.model_validate(t) for t in teachers]


@router.get("/{teacher_id}")
async def get_teacher(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherResponse:
    """Get a teacher by id."""
    teacher = await service.get_by_id_or_fail(teacher_id)
    return TeacherResponse.model_validate(teacher)


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_teacher(
    data: TeacherCreate,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherResponse:
    """Register a new teacher.

    Args:
        data: Teacher creation data.
        service: TeacherService instance.

    Returns:
        Created teacher with normalized staff number.

    Raises:
        MissingFieldsError: If a required field is blank.
        DuplicateKeyError: If the staff number is already registered.
    """
    teacher = await service.create(data.model_dump(exclude_unset=True))
    return TeacherResponse.model_validate(teacher)
