"""Students API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi import status as http_status

from academic_records.schemas.student import StudentCreate, StudentResponse
from academic_records.services.student_service import StudentService
from academic_records.utils.dependencies import dependencies

router = APIRouter(
    prefix="/students",
    tags=["Students"],
)


@router.get("")
async def list_students(
    limit: int = Query(default=50, ge=1, le=200, description="Max results"),
    offset: int = Query(default=0, ge=0, description="Results to skip"),
    service: StudentService = Depends(dependencies.student),
) -> list[StudentResponse]:
    """List students ordered by id."""
    students = await service.get_all(limit=limit, offset=offset)
    return [StudentResponse.model_validate(s) for s in students]


@router.get("/{student_id}")
async def get_student(
    student_id: int,
    service: StudentService = Depends(dependencies.student),
) -> StudentResponse:
    """Get a student by id."""
    student = await service.get_by_id_or_fail(student_id)
    return StudentResponse.model_validate(student)


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_student(
    data: StudentCreate,
    service: StudentService = Depends(dependencies.student),
) -> StudentResponse:
    """Register a new student.

    Args:
        data: Student creation data.
        service: StudentService instance.

    Returns:
        Created student with normalized identity number.

    Raises:
        MissingFieldsError: If a required field is blank.
        DuplicateKeyError: If the identity number is already registered.
    """
    student = await service.create(data.model_dump(exclude_unset=True))
    return StudentResponse.model_validate(student)
