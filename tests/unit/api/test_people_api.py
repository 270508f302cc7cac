"""Unit tests for student and teacher API endpoints."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import status

from academic_records.utils.dependencies import dependencies


@pytest.fixture
def student_service(app):
    service = MagicMock()
    service.create = AsyncMock(
        return_value=SimpleNamespace(
            id=1, identity_number="12345678", first_name="Ana", last_name="Diaz"
        )
    )
    app.dependency_overrides[dependencies.student] = lambda: service
    return service


@pytest.fixture
def teacher_service(app):
    service = MagicMock()
    service.create = AsyncMock()
    app.dependency_overrides[dependencies.teacher] = lambda: service
    return service


class TestCreateStudent:
    @pytest.mark.asyncio
    async def test_accepts_punctuated_identity_number(
        self, async_client, student_service
    ):
        response = await async_client.post(
            "/api/students",
            json={
                "identity_number": "12.345.678",
                "first_name": "Ana",
                "last_name": "Diaz",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["identity_number"] == "12345678"
        student_service.create.assert_awaited_once_with(
            {"identity_number": "12.345.678", "first_name": "Ana", "last_name": "Diaz"}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, length",
        [("identity_number", 41), ("first_name", 101), ("last_name", 101)],
    )
    async def test_rejects_over_length_fields(
        self, async_client, student_service, field, length
    ):
        payload = {
            "identity_number": "12345678",
            "first_name": "Ana",
            "last_name": "Diaz",
        }
        payload[field] = "1" * length

        response = await async_client.post("/api/students", json=payload)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        student_service.create.assert_not_awaited()


class TestCreateTeacher:
    @pytest.mark.asyncio
    async def test_rejects_over_length_email(self, async_client, teacher_service):
        response = await async_client.post(
            "/api/teachers",
            json={
                "staff_number": "T0042",
                "first_name": "Luis",
                "last_name": "Perez",
                "email": "x" * 250 + "@example.edu",
            },
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        teacher_service.create.assert_not_awaited()
