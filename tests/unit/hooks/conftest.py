"""Fixtures for exercising lifecycle hooks without a database."""

from types import SimpleNamespace
from typing import Any, Optional

import pytest

from academic_records.models import (
    DegreeProgram,
    PlanSubject,
    ProgramPlan,
    Student,
    Subject,
    Teacher,
)


class FakeTransaction:
    """In-memory Transaction: records are plain namespaces grouped by model.

    ``query_one`` matches records whose attributes equal every filter, the
    same contract ``SessionTransaction`` fulfils against the database.
    """

    def __init__(self) -> None:
        self.records: dict[type, list[SimpleNamespace]] = {}
        self.queries: list[tuple[str, dict[str, Any]]] = []

    def add(self, model: type, **fields: Any) -> SimpleNamespace:
        record = SimpleNamespace(**fields)
        self.records.setdefault(model, []).append(record)
        return record

    async def query_one(self, model: type, **where: Any) -> Optional[SimpleNamespace]:
        self.queries.append((model.__name__, where))
        for record in self.records.get(model, []):
            if all(getattr(record, key, None) == value for key, value in where.items()):
                return record
        return None


@pytest.fixture
def tx() -> FakeTransaction:
    return FakeTransaction()


@pytest.fixture
def catalog(tx: FakeTransaction) -> SimpleNamespace:
    """A small academic catalog shared by the rule tests.

    - program 1 (LIC-MAT) with a Draft plan (id 10, 3 years) and a Current
      plan (id 11, 4 years)
    - program 2 (ING-CIV) without plans
    - subjects 100 "Algebra Lineal" (placed in plan 10) and 101 "Fisica I"
    - one student and one teacher
    """
    return SimpleNamespace(
        program=tx.add(
            DegreeProgram, id=1, code="LIC-MAT", name="Matematica", type="Undergraduate"
        ),
        empty_program=tx.add(
            DegreeProgram, id=2, code="ING-CIV", name="Ingenieria", type="Undergraduate"
        ),
        draft_plan=tx.add(
            ProgramPlan,
            id=10,
            program_id=1,
            effective_year=2020,
            duration_years=3,
            state="Draft",
        ),
        current_plan=tx.add(
            ProgramPlan,
            id=11,
            program_id=1,
            effective_year=2015,
            duration_years=4,
            state="Current",
        ),
        algebra=tx.add(Subject, id=100, name="Algebra Lineal"),
        physics=tx.add(Subject, id=101, name="Fisica I"),
        placement=tx.add(
            PlanSubject,
            id=1000,
            plan_id=10,
            subject_id=100,
            year_in_plan=1,
            term="S1",
            state="Active",
        ),
        student=tx.add(
            Student, id=1, identity_number="12345678", first_name="Ana", last_name="Diaz"
        ),
        teacher=tx.add(
            Teacher,
            id=1,
            staff_number="T0042",
            first_name="Luis",
            last_name="Perez",
            email="lperez@example.edu",
        ),
    )
