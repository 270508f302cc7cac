"""Subject model representing academic subjects."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from academic_records.models.base import BaseModel


class Subject(BaseModel):
    """Subject model for storing academic subjects.

    Subjects are shared across program plans through PlanSubject rows.
    The name is stored normalized (trimmed, single spaces) and is unique.

    Attributes:
        name: Name of the subject (e.g., "Algebra Lineal")
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "subjects"

    name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True
    )

    def __repr__(self) -> str:
        """String representation of the subject."""
        return f"Subject(id={self.id}, name={self.name!r})"
