"""Teacher service providing business logic for Teacher model operations.

Create runs the Teacher hook, which normalizes the staff number and keeps
it unique.
"""

import logging
from typing import List

from sqlalchemy import or_, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from academic_records.exceptions import DatabaseConnectionError
from academic_records.models.teacher import Teacher
from academic_records.services.base import BaseService

logger = logging.getLogger(__name__)


class TeacherService(BaseService[Teacher]):
    """Service for managing Teacher entities.

    Usage:
        service = TeacherService(db_session)
        teacher = await service.create(
            {
                "staff_number": "A-1024",
                "first_name": "Ana",
                "last_name": "Suárez",
                "email": "ana.suarez@example.edu",
            }
        )
        # teacher.staff_number == "A1024"

    Attributes:
        model: Teacher model class
        db: Database session for operations
    """

    model = Teacher

    async def search(self, search: str = "", limit: int = 10) -> List[Teacher]:
        """Search teachers by first or last name with limit.

        Args:
            search: Search term to filter by name (case-insensitive).
            limit: Maximum number of results to return.

        Returns:
            List of matching Teacher instances ordered by last name.

        Raises:
            DatabaseConnectionError: If database operation fails.
        """
        try:
            stmt = (
                select(Teacher)
                .order_by(Teacher.last_name, Teacher.first_name)
                .limit(limit)
            )
            if search:
                pattern = f"%{search}%"
                stmt = stmt.where(
                    or_(
                        Teacher.first_name.ilike(pattern),
                        Teacher.last_name.ilike(pattern),
                    )
                )
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                "Failed to search teachers",
                extra={"search": search, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during search: {str(e)}"
            ) from e
