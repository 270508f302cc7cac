"""Unit tests for program plan and plan subject API endpoints."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import status

from academic_records.exceptions import InvalidStateError, OutOfRangeError
from academic_records.models import PlanState, PlanSubjectState
from academic_records.utils.dependencies import dependencies


def _plan(**overrides):
    fields = {
        "id": 10,
        "program_id": 1,
        "effective_year": 2024,
        "duration_years": 5,
        "state": PlanState.DRAFT,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture
def plan_service(app):
    service = MagicMock()
    app.dependency_overrides[dependencies.program_plan] = lambda: service
    return service


@pytest.fixture
def plan_subject_service(app):
    service = MagicMock()
    app.dependency_overrides[dependencies.plan_subject] = lambda: service
    return service


class TestProgramPlansApi:
    @pytest.mark.asyncio
    async def test_create_plan(self, async_client, plan_service):
        plan_service.create = AsyncMock(return_value=_plan())

        response = await async_client.post(
            "/api/program-plans",
            json={"program_id": 1, "effective_year": 2024, "duration_years": 5},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["state"] == "Draft"
        plan_service.create.assert_awaited_once_with(
            {"program_id": 1, "effective_year": 2024, "duration_years": 5}
        )

    @pytest.mark.asyncio
    async def test_out_of_range_year(self, async_client, plan_service):
        plan_service.create = AsyncMock(
            side_effect=OutOfRangeError(
                "effective_year must be an integer between 2000 and 2026.",
                target="effective_year",
                code="EFFECTIVE_YEAR_OUT_OF_RANGE",
            )
        )

        response = await async_client.post(
            "/api/program-plans",
            json={"program_id": 1, "effective_year": 1999, "duration_years": 5},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["target"] == "effective_year"

    @pytest.mark.asyncio
    async def test_state_transition(self, async_client, plan_service):
        plan_service.update = AsyncMock(return_value=_plan(state=PlanState.CURRENT))

        response = await async_client.patch(
            "/api/program-plans/10", json={"state": "Current"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["state"] == "Current"
        plan_service.update.assert_awaited_once_with(10, {"state": PlanState.CURRENT})

    @pytest.mark.asyncio
    async def test_frozen_plan(self, async_client, plan_service):
        plan_service.update = AsyncMock(
            side_effect=InvalidStateError(
                "Cannot modify a plan in state Current.",
                target="duration_years",
                code="PLAN_NOT_EDITABLE",
            )
        )

        response = await async_client.patch(
            "/api/program-plans/11", json={"duration_years": 6}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "InvalidState"

    @pytest.mark.asyncio
    async def test_list_plan_subjects(self, async_client, plan_service):
        plan_service.get_subjects = AsyncMock(
            return_value=[
                SimpleNamespace(
                    id=1000,
                    plan_id=10,
                    subject_id=100,
                    year_in_plan=1,
                    term="S1",
                    state=PlanSubjectState.ACTIVE,
                )
            ]
        )

        response = await async_client.get("/api/program-plans/10/subjects")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()[0]["term"] == "S1"
        plan_service.get_subjects.assert_awaited_once_with(10)


class TestPlanSubjectsApi:
    @pytest.mark.asyncio
    async def test_update_forwards_unknown_fields(self, async_client, plan_subject_service):
        plan_subject_service.update = AsyncMock(
            return_value=SimpleNamespace(
                id=1000,
                plan_id=10,
                subject_id=100,
                year_in_plan=2,
                term="S1",
                state=PlanSubjectState.ACTIVE,
            )
        )

        await async_client.patch(
            "/api/plan-subjects/1000", json={"year_in_plan": 2, "credits": 6}
        )

        plan_subject_service.update.assert_awaited_once_with(
            1000, {"year_in_plan": 2, "credits": 6}
        )
