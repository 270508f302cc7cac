"""Program plan schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel

from academic_records.models.program_plan import PlanState


class ProgramPlanCreate(BaseModel):
    """Schema for creating a program plan.

    Attributes:
        program_id: Degree program the plan belongs to.
        effective_year: First year the plan applies to.
        duration_years: Length of the plan in years.
        state: Initial state, Draft when omitted.
    """

    program_id: Optional[int] = None
    effective_year: Optional[int] = None
    duration_years: Optional[int] = None
    state: Optional[PlanState] = None


class ProgramPlanUpdate(BaseModel):
    """Schema for updating a program plan."""

    program_id: Optional[int] = None
    effective_year: Optional[int] = None
    duration_years: Optional[int] = None
    state: Optional[PlanState] = None


class ProgramPlanResponse(BaseModel):
    """Response schema for program plan."""

    id: int
    program_id: int
    effective_year: int
    duration_years: int
    state: PlanState

    model_config = {"from_attributes": True}
