"""Student service providing business logic for Student model operations."""

from academic_records.models.student import Student
from academic_records.services.base import BaseService


class StudentService(BaseService[Student]):
    """Service for managing Student entities.

    Create runs the Student hook: the identity number is stored without
    dots, hyphens or spaces and must be unique.
    """

    model = Student
