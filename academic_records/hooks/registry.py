"""Registration and dispatch of ``before`` lifecycle hooks.

A hook is an async function ``(tx, request) -> None`` bound to one
(event, entity) pair. It accepts a change by returning and rejects it by
raising a ``RuleViolation``.

Usage:
    @registry.before(Event.CREATE, Subject)
    async def before_create_subject(tx, request):
        ...

    await registry.run(Event.CREATE, "Subject", tx, request)
"""

import enum
import logging
from typing import Awaitable, Callable, Optional, Union

from academic_records.exceptions import RuleViolation
from academic_records.hooks.request import HookRequest
from academic_records.hooks.transaction import Transaction

logger = logging.getLogger(__name__)

Hook = Callable[[Transaction, HookRequest], Awaitable[None]]
EntityKey = Union[str, type]


class Event(str, enum.Enum):
    """Lifecycle phase a hook runs before."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


def _entity_name(entity: EntityKey) -> str:
    return entity if isinstance(entity, str) else entity.__name__


class HookRegistry:
    """Maps (event, entity) pairs to their hook."""

    def __init__(self) -> None:
        self._hooks: dict[tuple[Event, str], Hook] = {}

    def before(self, event: Event, entity: EntityKey) -> Callable[[Hook], Hook]:
        """Decorator registering a hook to run before ``event`` on ``entity``.

        Raises:
            ValueError: If a hook is already registered for the pair
        """
        key = (Event(event), _entity_name(entity))

        def decorator(func: Hook) -> Hook:
            if key in self._hooks:
                raise ValueError(f"Hook already registered for {key[0].value} {key[1]}")
            self._hooks[key] = func
            return func

        return decorator

    def get(self, event: Event, entity: EntityKey) -> Optional[Hook]:
        """Return the hook for the pair, or None."""
        return self._hooks.get((Event(event), _entity_name(entity)))

    def registered(self) -> list[tuple[Event, str]]:
        """All registered (event, entity) pairs."""
        return sorted(self._hooks, key=lambda key: (key[1], key[0].value))

    async def run(
        self,
        event: Event,
        entity: EntityKey,
        tx: Transaction,
        request: HookRequest,
    ) -> None:
        """Run the hook for the pair; pairs without a hook accept the change.

        Raises:
            RuleViolation: If the hook rejects the change
        """
        name = _entity_name(entity)
        hook = self.get(event, name)
        if hook is None:
            return
        try:
            await hook(tx, request)
        except RuleViolation as exc:
            logger.debug(
                f"Rejected {Event(event).value} {name}: {exc.message}",
                extra={
                    "entity": name,
                    "event": Event(event).value,
                    "kind": exc.kind,
                    "code": exc.code,
                    "target": exc.target,
                },
            )
            raise


# Hooks of the academic records entities register here
registry = HookRegistry()
