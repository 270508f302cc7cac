"""Plan subject schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel

from academic_records.models.plan_subject import PlanSubjectState


class PlanSubjectCreate(BaseModel):
    """Schema for adding a subject to a plan.

    Attributes:
        plan_id: Owning plan, which must be in Draft.
        subject_id: Subject to place in the plan.
        year_in_plan: Year of the plan (1..plan duration).
        term: "S1" or "S2"; checked by the PlanSubject hook.
        state: Offering state, Active when omitted.
    """

    plan_id: Optional[int] = None
    subject_id: Optional[int] = None
    year_in_plan: Optional[int] = None
    term: Optional[str] = None
    state: Optional[PlanSubjectState] = None


class PlanSubjectUpdate(BaseModel):
    """Schema for updating a plan subject.

    Unknown fields are kept so the hook can reject them by name.
    """

    plan_id: Optional[int] = None
    subject_id: Optional[int] = None
    year_in_plan: Optional[int] = None
    term: Optional[str] = None
    state: Optional[PlanSubjectState] = None

    model_config = {"extra": "allow"}


class PlanSubjectResponse(BaseModel):
    """Response schema for plan subject."""

    id: int
    plan_id: int
    subject_id: int
    year_in_plan: int
    term: str
    state: PlanSubjectState

    model_config = {"from_attributes": True}
