"""Tests for DegreeProgram lifecycle hooks."""

import pytest

from academic_records.exceptions import (
    DuplicateKeyError,
    ImmutableFieldError,
    InUseError,
    InvalidEnumError,
    InvalidFormatError,
    MissingFieldsError,
    MissingIdError,
    NotFoundError,
)
from academic_records.hooks.degree_programs import (
    before_create_degree_program,
    before_delete_degree_program,
    before_update_degree_program,
)
from academic_records.hooks.request import HookRequest


def _create_request(**overrides):
    data = {"code": " lic fis ", "name": "  Licenciatura   en Fisica ", "type": "Undergraduate"}
    data.update(overrides)
    return HookRequest(data=data)


class TestBeforeCreateDegreeProgram:
    @pytest.mark.asyncio
    async def test_normalizes_code_and_name(self, tx, catalog):
        request = _create_request()

        await before_create_degree_program(tx, request)

        assert request.data["code"] == "LICFIS"
        assert request.data["name"] == "Licenciatura en Fisica"

    @pytest.mark.asyncio
    async def test_rejects_duplicate_code(self, tx, catalog):
        request = _create_request(code="lic-mat")

        with pytest.raises(DuplicateKeyError) as exc_info:
            await before_create_degree_program(tx, request)

        assert exc_info.value.target == "code"
        assert exc_info.value.code == "PROGRAM_CODE_EXISTS"

    @pytest.mark.asyncio
    async def test_rejects_long_code(self, tx):
        request = _create_request(code="ABCDEFGHIJK")

        with pytest.raises(InvalidFormatError) as exc_info:
            await before_create_degree_program(tx, request)

        assert exc_info.value.code == "PROGRAM_CODE_LENGTH"

    @pytest.mark.asyncio
    async def test_rejects_code_characters(self, tx):
        request = _create_request(code="LIC/MAT")

        with pytest.raises(InvalidFormatError) as exc_info:
            await before_create_degree_program(tx, request)

        assert exc_info.value.code == "PROGRAM_CODE_FORMAT"

    @pytest.mark.asyncio
    async def test_rejects_long_name(self, tx):
        request = _create_request(name="x" * 121)

        with pytest.raises(InvalidFormatError) as exc_info:
            await before_create_degree_program(tx, request)

        assert exc_info.value.target == "name"

    @pytest.mark.asyncio
    async def test_requires_type(self, tx):
        request = _create_request(type=None)

        with pytest.raises(MissingFieldsError) as exc_info:
            await before_create_degree_program(tx, request)

        assert exc_info.value.missing == ["type"]


class TestBeforeUpdateDegreeProgram:
    @pytest.mark.asyncio
    async def test_same_code_after_normalization_is_accepted(self, tx, catalog):
        request = HookRequest.for_record({"code": " lic-mat", "name": " Mate  "}, path_id=1)

        await before_update_degree_program(tx, request)

        assert request.data == {"code": "LIC-MAT", "name": "Mate"}

    @pytest.mark.asyncio
    async def test_changing_code_is_rejected(self, tx, catalog):
        request = HookRequest.for_record({"code": "LIC-FIS"}, path_id=1)

        with pytest.raises(ImmutableFieldError) as exc_info:
            await before_update_degree_program(tx, request)

        assert exc_info.value.code == "PROGRAM_CODE_IMMUTABLE"

    @pytest.mark.asyncio
    async def test_name_may_repeat_another_program(self, tx, catalog):
        request = HookRequest.for_record({"name": "Ingenieria"}, path_id=1)

        await before_update_degree_program(tx, request)

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, tx, catalog):
        request = HookRequest.for_record({"name": "   "}, path_id=1)

        with pytest.raises(InvalidFormatError):
            await before_update_degree_program(tx, request)

    @pytest.mark.asyncio
    async def test_missing_id(self, tx, catalog):
        with pytest.raises(MissingIdError):
            await before_update_degree_program(tx, HookRequest(data={"name": "X"}))

    @pytest.mark.asyncio
    async def test_unknown_program(self, tx, catalog):
        request = HookRequest.for_record({"name": "X"}, path_id=99)

        with pytest.raises(NotFoundError) as exc_info:
            await before_update_degree_program(tx, request)

        assert exc_info.value.status_code == 404


class TestBeforeDeleteDegreeProgram:
    @pytest.mark.asyncio
    async def test_program_with_plans_is_in_use(self, tx, catalog):
        request = HookRequest.for_record({}, path_id=1)

        with pytest.raises(InUseError) as exc_info:
            await before_delete_degree_program(tx, request)

        assert exc_info.value.code == "PROGRAM_IN_USE"

    @pytest.mark.asyncio
    async def test_program_without_plans_is_deletable(self, tx, catalog):
        await before_delete_degree_program(tx, HookRequest.for_record({}, path_id=2))


class TestDegreeProgramType:
    @pytest.mark.asyncio
    async def test_create_rejects_unknown_type(self, tx):
        request = _create_request(type="Doctorate")

        with pytest.raises(InvalidEnumError) as exc_info:
            await before_create_degree_program(tx, request)

        assert exc_info.value.target == "type"
        assert exc_info.value.code == "PROGRAM_TYPE_INVALID"

    @pytest.mark.asyncio
    async def test_update_accepts_known_type(self, tx, catalog):
        request = HookRequest.for_record({"type": "Technical"}, path_id=1)

        await before_update_degree_program(tx, request)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["type", "code", "name"])
    async def test_update_rejects_null(self, tx, catalog, field):
        request = HookRequest.for_record({field: None}, path_id=1)

        with pytest.raises(MissingFieldsError) as exc_info:
            await before_update_degree_program(tx, request)

        assert exc_info.value.missing == [field]
