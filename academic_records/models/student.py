"""Student model representing enrolled students."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from academic_records.models.base import BaseModel


class Student(BaseModel):
    """Student identified by a normalized national identity number.

    Attributes:
        identity_number: Identity number with dots, hyphens and spaces removed
        first_name: Given name
        last_name: Family name
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "students"

    identity_number: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True, index=True
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of the student."""
        return (
            f"Student(id={self.id}, identity_number={self.identity_number!r}, "
            f"last_name={self.last_name!r})"
        )
