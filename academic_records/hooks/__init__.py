"""Lifecycle hooks validating academic records before they are persisted.

Importing this package registers every entity hook on ``registry``.
"""

from academic_records.hooks import (  # noqa: F401
    degree_programs,
    plan_subjects,
    program_plans,
    students,
    subjects,
    teachers,
)
from academic_records.hooks.registry import Event, HookRegistry, registry
from academic_records.hooks.request import (
    ByBody,
    ByPath,
    HookRequest,
    RecordRef,
    resolve_record_ref,
)
from academic_records.hooks.transaction import SessionTransaction, Transaction

__all__ = [
    "ByBody",
    "ByPath",
    "Event",
    "HookRegistry",
    "HookRequest",
    "RecordRef",
    "SessionTransaction",
    "Transaction",
    "registry",
    "resolve_record_ref",
]
