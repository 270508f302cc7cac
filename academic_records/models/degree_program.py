"""Degree program model."""

import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from academic_records.models.base import BaseModel, enum_values


class ProgramType(str, enum.Enum):
    """Kind of degree a program awards.

    Attributes:
        UNDERGRADUATE: Bachelor level program
        POSTGRADUATE: Master or doctoral level program
        TECHNICAL: Short technical degree
    """

    UNDERGRADUATE = "Undergraduate"
    POSTGRADUATE = "Postgraduate"
    TECHNICAL = "Technical"


class DegreeProgram(BaseModel):
    """Degree program identified by a short upper-case code.

    The code is fixed once the program exists; a program cannot be removed
    while any ProgramPlan still points at it.

    Attributes:
        code: Upper-case code without whitespace (e.g., "ISI", "LIC-MAT")
        name: Display name with collapsed whitespace
        type: Kind of degree (enum)
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "degree_programs"

    code: Mapped[str] = mapped_column(
        String(10), nullable=False, unique=True, index=True
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    type: Mapped[ProgramType] = mapped_column(
        Enum(
            ProgramType,
            native_enum=False,
            length=20,
            values_callable=enum_values,
        ),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of the degree program."""
        return (
            f"DegreeProgram(id={self.id}, code={self.code!r}, "
            f"type={self.type.value})"
        )
