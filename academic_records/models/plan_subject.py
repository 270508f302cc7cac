"""Plan subject model: a subject placed in a year and term of a plan."""

import enum

from sqlalchemy import Enum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from academic_records.models.base import BaseModel, enum_values


class Term(str, enum.Enum):
    """Half-year term in which a subject is taught."""

    S1 = "S1"
    S2 = "S2"


class PlanSubjectState(str, enum.Enum):
    """Whether a subject is currently offered within its plan."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class PlanSubject(BaseModel):
    """Plan subject model.

    Rows are only created, changed or removed while the owning plan is in
    Draft. ``plan_id`` and ``subject_id`` are fixed after creation and the
    pair is unique.

    Attributes:
        plan_id: Foreign key to program_plans table
        subject_id: Foreign key to subjects table
        year_in_plan: Year of the plan the subject belongs to (1-based)
        term: Term within the year (S1/S2)
        state: Offering state (enum), Active on creation
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "plan_subjects"

    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("program_plans.id"), nullable=False, index=True
    )
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id"), nullable=False, index=True
    )
    year_in_plan: Mapped[int] = mapped_column(Integer, nullable=False)
    # Stored as plain string; membership in Term is checked by the hooks
    term: Mapped[str] = mapped_column(String(2), nullable=False)
    state: Mapped[PlanSubjectState] = mapped_column(
        Enum(
            PlanSubjectState,
            native_enum=False,
            length=20,
            values_callable=enum_values,
        ),
        nullable=False,
        default=PlanSubjectState.ACTIVE,
    )

    __table_args__ = (
        UniqueConstraint("plan_id", "subject_id", name="uq_plan_subject_plan_subject"),
    )

    def __repr__(self) -> str:
        """String representation of the plan subject."""
        return (
            f"PlanSubject(id={self.id}, plan_id={self.plan_id}, "
            f"subject_id={self.subject_id}, year_in_plan={self.year_in_plan}, "
            f"term={self.term!r})"
        )
