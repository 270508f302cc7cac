"""Teacher schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel, Field


class TeacherCreate(BaseModel):
    """Schema for creating a teacher.

    Attributes:
        staff_number: Staff number, any punctuation (e.g. "A-1024").
        first_name: Given name.
        last_name: Family name.
        email: Contact email.
    """

    # Raw input may carry separators; the hook bounds the normalized value
    staff_number: Optional[str] = Field(default=None, max_length=40)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=255)


class TeacherResponse(BaseModel):
    """Response schema for teacher."""

    id: int
    staff_number: str
    first_name: str
    last_name: str
    email: str

    model_config = {"from_attributes": True}
