"""Pydantic schemas for API request/response models."""

from academic_records.schemas.degree_program import (
    DegreeProgramCreate,
    DegreeProgramResponse,
    DegreeProgramUpdate,
)
from academic_records.schemas.plan_subject import (
    PlanSubjectCreate,
    PlanSubjectResponse,
    PlanSubjectUpdate,
)
from academic_records.schemas.program_plan import (
    ProgramPlanCreate,
    ProgramPlanResponse,
    ProgramPlanUpdate,
)
from academic_records.schemas.student import StudentCreate, StudentResponse
from academic_records.schemas.subject import (
    SubjectCreate,
    SubjectResponse,
    SubjectUpdate,
)
from academic_records.schemas.teacher import TeacherCreate, TeacherResponse

__all__ = [
    "DegreeProgramCreate",
    "DegreeProgramResponse",
    "DegreeProgramUpdate",
    "PlanSubjectCreate",
    "PlanSubjectResponse",
    "PlanSubjectUpdate",
    "ProgramPlanCreate",
    "ProgramPlanResponse",
    "ProgramPlanUpdate",
    "StudentCreate",
    "StudentResponse",
    "SubjectCreate",
    "SubjectResponse",
    "SubjectUpdate",
    "TeacherCreate",
    "TeacherResponse",
]
