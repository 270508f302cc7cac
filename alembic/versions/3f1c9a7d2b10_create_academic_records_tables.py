"""create academic records tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create students, teachers, subjects, programs, plans and plan subjects."""
    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("identity_number", sa.String(length=20), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_students"),
    )
    op.create_index(
        "ix_students_identity_number", "students", ["identity_number"], unique=True
    )
    op.create_index("ix_students_last_name", "students", ["last_name"], unique=False)

    op.create_table(
        "teachers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("staff_number", sa.String(length=20), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_teachers"),
    )
    op.create_index(
        "ix_teachers_staff_number", "teachers", ["staff_number"], unique=True
    )
    op.create_index("ix_teachers_last_name", "teachers", ["last_name"], unique=False)

    op.create_table(
        "subjects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_subjects"),
    )
    op.create_index("ix_subjects_name", "subjects", ["name"], unique=True)

    op.create_table(
        "degree_programs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("code", sa.String(length=10), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_degree_programs"),
    )
    op.create_index(
        "ix_degree_programs_code", "degree_programs", ["code"], unique=True
    )

    op.create_table(
        "program_plans",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("program_id", sa.Integer(), nullable=False),
        sa.Column("effective_year", sa.Integer(), nullable=False),
        sa.Column("duration_years", sa.Integer(), nullable=False),
        sa.Column("state", sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(
            ["program_id"],
            ["degree_programs.id"],
            name="fk_program_plans_program_id",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_program_plans"),
        sa.UniqueConstraint(
            "program_id", "effective_year", name="uq_program_plan_program_year"
        ),
    )
    op.create_index(
        "ix_program_plans_program_id", "program_plans", ["program_id"], unique=False
    )
    op.create_index("ix_program_plans_state", "program_plans", ["state"], unique=False)

    op.create_table(
        "plan_subjects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_timestamps(),
        sa.Column("plan_id", sa.Integer(), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("year_in_plan", sa.Integer(), nullable=False),
        sa.Column("term", sa.String(length=2), nullable=False),
        sa.Column("state", sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(
            ["plan_id"], ["program_plans.id"], name="fk_plan_subjects_plan_id"
        ),
        sa.ForeignKeyConstraint(
            ["subject_id"], ["subjects.id"], name="fk_plan_subjects_subject_id"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_plan_subjects"),
        sa.UniqueConstraint(
            "plan_id", "subject_id", name="uq_plan_subject_plan_subject"
        ),
    )
    op.create_index(
        "ix_plan_subjects_plan_id", "plan_subjects", ["plan_id"], unique=False
    )
    op.create_index(
        "ix_plan_subjects_subject_id", "plan_subjects", ["subject_id"], unique=False
    )


def downgrade() -> None:
    """Drop academic records tables."""
    op.drop_index("ix_plan_subjects_subject_id", table_name="plan_subjects")
    op.drop_index("ix_plan_subjects_plan_id", table_name="plan_subjects")
    op.drop_table("plan_subjects")
    op.drop_index("ix_program_plans_state", table_name="program_plans")
    op.drop_index("ix_program_plans_program_id", table_name="program_plans")
    op.drop_table("program_plans")
    op.drop_index("ix_degree_programs_code", table_name="degree_programs")
    op.drop_table("degree_programs")
    op.drop_index("ix_subjects_name", table_name="subjects")
    op.drop_table("subjects")
    op.drop_index("ix_teachers_last_name", table_name="teachers")
    op.drop_index("ix_teachers_staff_number", table_name="teachers")
    op.drop_table("teachers")
    op.drop_index("ix_students_last_name", table_name="students")
    op.drop_index("ix_students_identity_number", table_name="students")
    op.drop_table("students")
