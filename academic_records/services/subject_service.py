"""Subject service providing business logic for Subject model operations.

Create, update and delete run the Subject hooks: names are normalized and
unique, and subjects used by a plan cannot be deleted.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from academic_records.exceptions import DatabaseConnectionError
from academic_records.models.subject import Subject
from academic_records.services.base import BaseService

logger = logging.getLogger(__name__)


class SubjectService(BaseService[Subject]):
    """Service for managing Subject entities.

    Provides through BaseService inheritance:
    - create(data), update(id, data), delete(id) guarded by the Subject hooks
    - get_by_id(id), get_by_id_or_fail(id), get_all(limit, offset), find(...)
    - search(search, limit): Case-insensitive name search

    Usage:
        service = SubjectService(db_session)
        subject = await service.create({"name": "Algebra  Lineal"})
        matches = await service.search("algebra")

    Attributes:
        model: Subject model class
        db: Database session for operations
    """

    model = Subject

    async def search(self, search: str = "", limit: int = 10) -> List[Subject]:
        """Search subjects by name with limit.

        Args:
            search: Search term to filter by name (case-insensitive).
            limit: Maximum number of results to return.

        Returns:
            List of matching Subject instances ordered by name.

        Raises:
            DatabaseConnectionError: If database operation fails.
        """
        try:
            stmt = select(Subject).order_by(Subject.name).limit(limit)
            if search:
                stmt = stmt.where(Subject.name.ilike(f"%{search}%"))
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                "Failed to search subjects",
                extra={"search": search, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during search: {str(e)}"
            ) from e
