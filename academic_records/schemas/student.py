"""Student schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    """Schema for creating a student.

    Fields are optional at this layer; the Student hook reports missing
    ones together.

    Attributes:
        identity_number: Identity number, any punctuation (e.g. "12.345.678").
        first_name: Given name.
        last_name: Family name.
    """

    # Raw input may carry separators; the hook bounds the normalized value
    identity_number: Optional[str] = Field(default=None, max_length=40)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)


class StudentResponse(BaseModel):
    """Response schema for student."""

    id: int
    identity_number: str
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}
