"""Data models package."""

from academic_records.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    ModelError,
    RecordNotFoundError,
)
from academic_records.models.base import BaseModel
from academic_records.models.degree_program import DegreeProgram, ProgramType
from academic_records.models.plan_subject import PlanSubject, PlanSubjectState, Term
from academic_records.models.program_plan import PlanState, ProgramPlan
from academic_records.models.student import Student
from academic_records.models.subject import Subject
from academic_records.models.teacher import Teacher

__all__ = [
    "BaseModel",
    "ModelError",
    "RecordNotFoundError",
    "DatabaseConnectionError",
    "InvalidFilterError",
    "Student",
    "Teacher",
    "DegreeProgram",
    "ProgramType",
    "ProgramPlan",
    "PlanState",
    "PlanSubject",
    "PlanSubjectState",
    "Term",
    "Subject",
]
