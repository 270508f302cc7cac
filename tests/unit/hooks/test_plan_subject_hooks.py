"""Tests for PlanSubject lifecycle hooks."""

import pytest

from academic_records.exceptions import (
    DuplicateKeyError,
    ImmutableFieldError,
    InvalidEnumError,
    InvalidStateError,
    MissingFieldsError,
    NotFoundError,
    OutOfRangeError,
    ParentNotFoundError,
    UnknownFieldError,
)
from academic_records.hooks.plan_subjects import (
    before_create_plan_subject,
    before_delete_plan_subject,
    before_update_plan_subject,
)
from academic_records.hooks.request import HookRequest
from academic_records.models import PlanSubject, PlanSubjectState


def _create_request(**overrides):
    data = {"plan_id": 10, "subject_id": 101, "year_in_plan": 2, "term": "S2"}
    data.update(overrides)
    return HookRequest(data=data)


class TestBeforeCreatePlanSubject:
    @pytest.mark.asyncio
    async def test_defaults_state_to_active(self, tx, catalog):
        request = _create_request()

        await before_create_plan_subject(tx, request)

        assert request.data["state"] == PlanSubjectState.ACTIVE

    @pytest.mark.asyncio
    async def test_last_year_of_plan_is_accepted(self, tx, catalog):
        await before_create_plan_subject(tx, _create_request(year_in_plan=3))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("year", [0, 4])
    async def test_year_beyond_plan_duration(self, tx, catalog, year):
        with pytest.raises(OutOfRangeError) as exc_info:
            await before_create_plan_subject(tx, _create_request(year_in_plan=year))

        assert exc_info.value.target == "year_in_plan"
        assert exc_info.value.code == "YEAR_OUT_OF_RANGE"

    @pytest.mark.asyncio
    async def test_invalid_term(self, tx, catalog):
        with pytest.raises(InvalidEnumError) as exc_info:
            await before_create_plan_subject(tx, _create_request(term="S3"))

        assert exc_info.value.target == "term"
        assert exc_info.value.code == "TERM_INVALID"

    @pytest.mark.asyncio
    async def test_term_uses_injected_validator(self, tx, catalog):
        class OnlyAnnual:
            def is_valid(self, field_name, value):
                return value == "A"

        request = _create_request(term="S1")
        request.enums = OnlyAnnual()

        with pytest.raises(InvalidEnumError):
            await before_create_plan_subject(tx, request)

    @pytest.mark.asyncio
    async def test_unknown_plan(self, tx, catalog):
        with pytest.raises(ParentNotFoundError) as exc_info:
            await before_create_plan_subject(tx, _create_request(plan_id=99))

        assert exc_info.value.code == "PLAN_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_unknown_subject(self, tx, catalog):
        with pytest.raises(ParentNotFoundError) as exc_info:
            await before_create_plan_subject(tx, _create_request(subject_id=999))

        assert exc_info.value.target == "subject_id"

    @pytest.mark.asyncio
    async def test_plan_must_be_draft(self, tx, catalog):
        with pytest.raises(InvalidStateError) as exc_info:
            await before_create_plan_subject(tx, _create_request(plan_id=11))

        assert exc_info.value.target == "plan_id"

    @pytest.mark.asyncio
    async def test_subject_already_in_plan(self, tx, catalog):
        with pytest.raises(DuplicateKeyError) as exc_info:
            await before_create_plan_subject(tx, _create_request(subject_id=100))

        assert exc_info.value.code == "PLAN_SUBJECT_DUPLICATE"


class TestBeforeUpdatePlanSubject:
    @pytest.mark.asyncio
    async def test_edits_year_term_and_state(self, tx, catalog):
        request = HookRequest.for_record(
            {"year_in_plan": 3, "term": "S2", "state": "Inactive"}, path_id=1000
        )

        await before_update_plan_subject(tx, request)

    @pytest.mark.asyncio
    async def test_resending_references_is_accepted(self, tx, catalog):
        request = HookRequest.for_record(
            {"id": 1000, "plan_id": 10, "subject_id": 100, "year_in_plan": 1}
        )

        await before_update_plan_subject(tx, request)

    @pytest.mark.asyncio
    async def test_term_not_checked_when_absent(self, tx, catalog):
        catalog.placement.term = "legacy"

        await before_update_plan_subject(
            tx, HookRequest.for_record({"year_in_plan": 2}, path_id=1000)
        )

    @pytest.mark.asyncio
    async def test_invalid_term(self, tx, catalog):
        request = HookRequest.for_record({"term": "S3"}, path_id=1000)

        with pytest.raises(InvalidEnumError):
            await before_update_plan_subject(tx, request)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field, value", [("plan_id", 11), ("subject_id", 101)])
    async def test_references_are_immutable(self, tx, catalog, field, value):
        request = HookRequest.for_record({field: value}, path_id=1000)

        with pytest.raises(ImmutableFieldError) as exc_info:
            await before_update_plan_subject(tx, request)

        assert exc_info.value.target == field
        assert exc_info.value.code == "PLAN_SUBJECT_REFERENCE_IMMUTABLE"

    @pytest.mark.asyncio
    async def test_unknown_field(self, tx, catalog):
        request = HookRequest.for_record({"credits": 6}, path_id=1000)

        with pytest.raises(UnknownFieldError) as exc_info:
            await before_update_plan_subject(tx, request)

        assert exc_info.value.target == "credits"
        assert exc_info.value.code == "FIELD_NOT_EDITABLE"

    @pytest.mark.asyncio
    async def test_year_bounded_by_plan(self, tx, catalog):
        request = HookRequest.for_record({"year_in_plan": 4}, path_id=1000)

        with pytest.raises(OutOfRangeError):
            await before_update_plan_subject(tx, request)

    @pytest.mark.asyncio
    async def test_plan_must_be_draft(self, tx, catalog):
        tx.add(
            PlanSubject,
            id=1001,
            plan_id=11,
            subject_id=101,
            year_in_plan=1,
            term="S1",
            state="Active",
        )
        request = HookRequest.for_record({"state": "Inactive"}, path_id=1001)

        with pytest.raises(InvalidStateError):
            await before_update_plan_subject(tx, request)

    @pytest.mark.asyncio
    async def test_unknown_plan_subject(self, tx, catalog):
        request = HookRequest.for_record({"year_in_plan": 1}, path_id=5)

        with pytest.raises(NotFoundError):
            await before_update_plan_subject(tx, request)


class TestBeforeDeletePlanSubject:
    @pytest.mark.asyncio
    async def test_draft_plan_allows_delete(self, tx, catalog):
        await before_delete_plan_subject(tx, HookRequest.for_record({}, path_id=1000))

    @pytest.mark.asyncio
    async def test_non_draft_plan_blocks_delete(self, tx, catalog):
        tx.add(
            PlanSubject,
            id=1001,
            plan_id=11,
            subject_id=101,
            year_in_plan=1,
            term="S1",
            state="Active",
        )

        with pytest.raises(InvalidStateError):
            await before_delete_plan_subject(tx, HookRequest.for_record({}, path_id=1001))


class TestPlanSubjectNullUpdates:
    @pytest.mark.asyncio
    async def test_null_state_is_missing(self, tx, catalog):
        request = HookRequest.for_record({"state": None}, path_id=1000)

        with pytest.raises(MissingFieldsError) as exc_info:
            await before_update_plan_subject(tx, request)

        assert exc_info.value.missing == ["state"]

    @pytest.mark.asyncio
    async def test_all_null_fields_reported(self, tx, catalog):
        request = HookRequest.for_record(
            {"term": None, "year_in_plan": None}, path_id=1000
        )

        with pytest.raises(MissingFieldsError) as exc_info:
            await before_update_plan_subject(tx, request)

        assert exc_info.value.missing == ["year_in_plan", "term"]
