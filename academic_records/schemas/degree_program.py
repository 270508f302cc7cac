"""Degree program schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel

from academic_records.models.degree_program import ProgramType


class DegreeProgramCreate(BaseModel):
    """Schema for creating a degree program.

    Attributes:
        code: Program code; upper-cased and stripped of whitespace on save.
        name: Display name.
        type: Kind of degree.
    """

    code: Optional[str] = None
    name: Optional[str] = None
    type: Optional[ProgramType] = None


class DegreeProgramUpdate(BaseModel):
    """Schema for updating a degree program.

    ``code`` is accepted only when it matches the stored code.
    """

    code: Optional[str] = None
    name: Optional[str] = None
    type: Optional[ProgramType] = None


class DegreeProgramResponse(BaseModel):
    """Response schema for degree program."""

    id: int
    code: str
    name: str
    type: ProgramType

    model_config = {"from_attributes": True}
