"""Program plan service."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from academic_records.exceptions import DatabaseConnectionError
from academic_records.models.plan_subject import PlanSubject
from academic_records.models.program_plan import ProgramPlan
from academic_records.services.base import BaseService

logger = logging.getLogger(__name__)


class ProgramPlanService(BaseService[ProgramPlan]):
    """Service for managing ProgramPlan entities.

    Plans are created in Draft and frozen once they leave it; see
    ``academic_records.hooks.program_plans``.
    """

    model = ProgramPlan

    async def get_subjects(self, plan_id: int) -> List[PlanSubject]:
        """List the subjects of a plan ordered by year and term.

        Raises:
            RecordNotFoundError: If the plan does not exist
            DatabaseConnectionError: If database operation fails
        """
        await self.get_by_id_or_fail(plan_id)
        try:
            stmt = (
                select(PlanSubject)
                .where(PlanSubject.plan_id == plan_id)
                .order_by(PlanSubject.year_in_plan, PlanSubject.term, PlanSubject.id)
            )
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                "Failed to get plan subjects",
                extra={"plan_id": plan_id, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during get_subjects: {str(e)}"
            ) from e
