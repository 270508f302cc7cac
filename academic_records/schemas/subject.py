"""Subject schemas for API request/response models."""

from typing import Optional

from pydantic import BaseModel


class SubjectCreate(BaseModel):
    """Schema for creating a subject.

    Attributes:
        name: Name of the subject; whitespace is normalized on save.
    """

    name: Optional[str] = None


class SubjectUpdate(BaseModel):
    """Schema for renaming a subject."""

    name: Optional[str] = None


class SubjectResponse(BaseModel):
    """Response schema for subject.

    Attributes:
        id: Subject ID.
        name: Normalized subject name.
    """

    id: int
    name: str

    model_config = {"from_attributes": True}
