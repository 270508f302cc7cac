"""Tests for hook registration and dispatch."""

import pytest

from academic_records.exceptions import InUseError
from academic_records.hooks import registry
from academic_records.hooks.registry import Event, HookRegistry
from academic_records.hooks.request import HookRequest
from academic_records.models import (
    DegreeProgram,
    PlanSubject,
    ProgramPlan,
    Student,
    Subject,
    Teacher,
)


class TestHookRegistry:
    @pytest.mark.asyncio
    async def test_runs_registered_hook(self, tx):
        # Arrange
        hooks = HookRegistry()
        calls = []

        @hooks.before(Event.CREATE, Subject)
        async def hook(tx, request):
            calls.append(dict(request.data))
            request.data["name"] = "normalized"

        request = HookRequest(data={"name": "raw"})

        # Act
        await hooks.run(Event.CREATE, "Subject", tx, request)

        # Assert
        assert calls == [{"name": "raw"}]
        assert request.data == {"name": "normalized"}

    @pytest.mark.asyncio
    async def test_missing_hook_accepts(self, tx):
        hooks = HookRegistry()

        await hooks.run(Event.DELETE, Subject, tx, HookRequest())

    @pytest.mark.asyncio
    async def test_rejection_propagates(self, tx):
        hooks = HookRegistry()

        @hooks.before(Event.DELETE, "Subject")
        async def hook(tx, request):
            raise InUseError("in use", target="id", code="SUBJECT_IN_USE")

        with pytest.raises(InUseError):
            await hooks.run(Event.DELETE, Subject, tx, HookRequest())

    def test_duplicate_registration_fails(self):
        hooks = HookRegistry()

        @hooks.before(Event.CREATE, Subject)
        async def first(tx, request):
            pass

        with pytest.raises(ValueError):

            @hooks.before(Event.CREATE, "Subject")
            async def second(tx, request):
                pass

    def test_events_accept_plain_strings(self):
        hooks = HookRegistry()

        @hooks.before("UPDATE", Subject)
        async def hook(tx, request):
            pass

        assert hooks.get(Event.UPDATE, "Subject") is hook
        assert hooks.get(Event.CREATE, "Subject") is None


class TestApplicationRegistry:
    def test_expected_hooks_are_registered(self):
        registered = set(registry.registered())

        expected = {
            (Event.CREATE, Student.__name__),
            (Event.CREATE, Teacher.__name__),
        }
        for model in (DegreeProgram, ProgramPlan, PlanSubject, Subject):
            for event in Event:
                expected.add((event, model.__name__))

        assert registered == expected
