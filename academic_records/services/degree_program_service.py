"""Degree program service."""

from academic_records.models.degree_program import DegreeProgram
from academic_records.services.base import BaseService


class DegreeProgramService(BaseService[DegreeProgram]):
    """Service for managing DegreeProgram entities."""

    model = DegreeProgram
