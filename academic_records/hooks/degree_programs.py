"""Lifecycle hooks for DegreeProgram records.

Codes are stored upper-case without whitespace and never change after
creation. A program referenced by any ProgramPlan cannot be deleted.
"""

import re

from academic_records.exceptions import (
    DuplicateKeyError,
    ImmutableFieldError,
    InUseError,
    InvalidEnumError,
    InvalidFormatError,
)
from academic_records.hooks.normalizers import normalize_code, normalize_name
from academic_records.hooks.registry import Event, registry
from academic_records.hooks.request import HookRequest
from academic_records.hooks.transaction import Transaction, fetch_target
from academic_records.hooks.validators import validate_not_null, validate_required
from academic_records.models.degree_program import DegreeProgram, ProgramType
from academic_records.models.program_plan import ProgramPlan

REQUIRED_FIELDS = ("code", "name", "type")
CODE_MAX_LENGTH = 10
CODE_PATTERN = re.compile(r"^[A-Z0-9._-]+$")
NAME_MAX_LENGTH = 120


def _validate_code(code: str) -> None:
    if not 1 <= len(code) <= CODE_MAX_LENGTH:
        raise InvalidFormatError(
            f"code must be between 1 and {CODE_MAX_LENGTH} characters.",
            target="code",
            code="PROGRAM_CODE_LENGTH",
        )
    if not CODE_PATTERN.match(code):
        raise InvalidFormatError(
            "code may only contain uppercase letters, digits, '.', '_' and '-'.",
            target="code",
            code="PROGRAM_CODE_FORMAT",
        )


def _validate_name(name: str) -> None:
    if not 1 <= len(name) <= NAME_MAX_LENGTH:
        raise InvalidFormatError(
            f"name must be between 1 and {NAME_MAX_LENGTH} characters.",
            target="name",
            code="PROGRAM_NAME_LENGTH",
        )


def _validate_type(request: HookRequest, value: object) -> None:
    if not request.enums.is_valid("type", value):
        allowed = ", ".join(program_type.value for program_type in ProgramType)
        raise InvalidEnumError(
            f"Invalid type. Use one of: {allowed}.",
            target="type",
            code="PROGRAM_TYPE_INVALID",
        )


@registry.before(Event.CREATE, DegreeProgram)
async def before_create_degree_program(tx: Transaction, request: HookRequest) -> None:
    data = request.data
    validate_required(data, REQUIRED_FIELDS)

    code = normalize_code(data["code"])
    name = normalize_name(data["name"])
    data["code"] = code
    data["name"] = name

    _validate_code(code)
    _validate_name(name)
    _validate_type(request, data["type"])

    if await tx.query_one(DegreeProgram, code=code):
        raise DuplicateKeyError(
            f"A degree program with code {code} already exists.",
            target="code",
            code="PROGRAM_CODE_EXISTS",
        )


@registry.before(Event.UPDATE, DegreeProgram)
async def before_update_degree_program(tx: Transaction, request: HookRequest) -> None:
    """Keep the code fixed and re-validate a new name.

    Name uniqueness is not enforced for degree programs.
    """
    program = await fetch_target(tx, DegreeProgram, request)
    data = request.data
    validate_not_null(data, REQUIRED_FIELDS)

    if "code" in data:
        code = normalize_code(data["code"])
        if code != program.code:
            raise ImmutableFieldError(
                "The code of a degree program cannot be changed.",
                target="code",
                code="PROGRAM_CODE_IMMUTABLE",
            )
        data["code"] = code

    if "name" in data:
        name = normalize_name(data["name"]) or ""
        _validate_name(name)
        data["name"] = name

    if "type" in data:
        _validate_type(request, data["type"])


@registry.before(Event.DELETE, DegreeProgram)
async def before_delete_degree_program(tx: Transaction, request: HookRequest) -> None:
    program = await fetch_target(tx, DegreeProgram, request)

    if await tx.query_one(ProgramPlan, program_id=program.id):
        raise InUseError(
            "Cannot delete: the degree program has program plans.",
            target="id",
            code="PROGRAM_IN_USE",
        )
