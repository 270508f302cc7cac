"""Program plan model: a dated curriculum version of a degree program."""

import enum

from sqlalchemy import Enum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from academic_records.models.base import BaseModel, enum_values


class PlanState(str, enum.Enum):
    """Lifecycle state of a program plan.

    Attributes:
        DRAFT: Being edited; the plan and its subjects are mutable
        CURRENT: In force; frozen except for state transitions
        LEGACY: Superseded; frozen except for state transitions
    """

    DRAFT = "Draft"
    CURRENT = "Current"
    LEGACY = "Legacy"


class ProgramPlan(BaseModel):
    """Program plan model.

    A plan belongs to one degree program and takes effect in a given year.
    Each (program, effective year) pair is unique. The plan's duration
    bounds the ``year_in_plan`` of its PlanSubject rows.

    Attributes:
        program_id: Foreign key to degree_programs table (immutable)
        effective_year: First academic year the plan applies to
        duration_years: Number of years the plan spans (1-10)
        state: Lifecycle state (enum), Draft on creation
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "program_plans"

    program_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("degree_programs.id"), nullable=False, index=True
    )
    effective_year: Mapped[int] = mapped_column(Integer, nullable=False)
    duration_years: Mapped[int] = mapped_column(Integer, nullable=False)
    state: Mapped[PlanState] = mapped_column(
        Enum(
            PlanState, native_enum=False, length=20, values_callable=enum_values
        ),
        nullable=False,
        default=PlanState.DRAFT,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint(
            "program_id", "effective_year", name="uq_program_plan_program_year"
        ),
    )

    def __repr__(self) -> str:
        """String representation of the program plan."""
        return (
            f"ProgramPlan(id={self.id}, program_id={self.program_id}, "
            f"effective_year={self.effective_year}, state={self.state.value})"
        )
