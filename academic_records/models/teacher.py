"""Teacher model representing academic staff."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from academic_records.models.base import BaseModel


class Teacher(BaseModel):
    """Teacher identified by a normalized staff number.

    Unlike names, the staff number is unique: two teachers may share a
    name but never a staff number.

    Attributes:
        staff_number: Staff number with dots, hyphens and spaces removed
        first_name: Given name
        last_name: Family name
        email: Contact email
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "teachers"

    staff_number: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True, index=True
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation of the teacher."""
        return (
            f"Teacher(id={self.id}, staff_number={self.staff_number!r}, "
            f"last_name={self.last_name!r})"
        )
