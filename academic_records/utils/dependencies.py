"""Dependency injection functions for FastAPI routes.

Each entity service gets a dependency function bound to a per-request
session from ``get_db_session``. Routes depend on ``dependencies.<entity>``
and tests swap services through ``app.dependency_overrides``.
"""

from typing import Any, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from academic_records.services import (
    DegreeProgramService,
    PlanSubjectService,
    ProgramPlanService,
    StudentService,
    SubjectService,
    TeacherService,
)
from academic_records.utils.db import get_db_session

T = TypeVar("T")


class ServiceDependency:
    """Descriptor that creates a dependency injection function for a service.

    Caches the dependency function to ensure the same function object is returned
    each time, enabling proper use of FastAPI's dependency_overrides.
    """

    def __init__(self, service_class: Type[T]) -> None:
        """Initialize service dependency descriptor.

        Args:
            service_class: The service class to create instances of.
        """
        self.service_class = service_class
        self._cached_func: Any = None

    def __get__(self, instance: Any, owner: type) -> Any:
        """Create and return cached dependency function when accessed."""
        if self._cached_func is None:

            def dependency_func(
                db: AsyncSession = Depends(get_db_session),
            ) -> T:
                """Get service instance for dependency injection."""
                return self.service_class(db)

            self._cached_func = dependency_func
        return self._cached_func


class ServiceDependencies:
    """Dependency functions for the academic records entity services."""

    student = ServiceDependency(StudentService)
    teacher = ServiceDependency(TeacherService)
    degree_program = ServiceDependency(DegreeProgramService)
    program_plan = ServiceDependency(ProgramPlanService)
    plan_subject = ServiceDependency(PlanSubjectService)
    subject = ServiceDependency(SubjectService)


dependencies = ServiceDependencies()
