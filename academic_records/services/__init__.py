"""Business logic services package."""

from academic_records.services.base import BaseService
from academic_records.services.degree_program_service import DegreeProgramService
from academic_records.services.plan_subject_service import PlanSubjectService
from academic_records.services.program_plan_service import ProgramPlanService
from academic_records.services.student_service import StudentService
from academic_records.services.subject_service import SubjectService
from academic_records.services.teacher_service import TeacherService

__all__ = [
    "BaseService",
    "DegreeProgramService",
    "PlanSubjectService",
    "ProgramPlanService",
    "StudentService",
    "SubjectService",
    "TeacherService",
]
