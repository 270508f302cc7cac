"""Plan subject service."""

from academic_records.models.plan_subject import PlanSubject
from academic_records.services.base import BaseService


class PlanSubjectService(BaseService[PlanSubject]):
    """Service for managing PlanSubject entities."""

    model = PlanSubject
