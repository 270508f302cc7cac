"""Read-only lookups performed by hooks inside the caller's transaction."""

import logging
from typing import Any, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from academic_records.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    NotFoundError,
)
from academic_records.hooks.request import HookRequest

logger = logging.getLogger(__name__)


class Transaction(Protocol):
    """Transaction handle passed explicitly to every hook."""

    async def query_one(self, model: type, **where: Any) -> Optional[Any]:
        """Return one record of ``model`` matching all equality filters, or None."""
        ...


class SessionTransaction:
    """Transaction handle over the request's AsyncSession.

    Lookups run on the same session the service later writes through, so
    every check observes the snapshot the write commits against.

    Usage:
        tx = SessionTransaction(db)
        plan = await tx.query_one(ProgramPlan, id=plan_id)
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def query_one(self, model: type, **where: Any) -> Optional[Any]:
        """Return the first ``model`` row matching ``where``.

        Raises:
            InvalidFilterError: If a filter key is not a model attribute
            DatabaseConnectionError: If database operation fails
        """
        try:
            query = select(model)
            for key, value in where.items():
                if not hasattr(model, key):
                    raise InvalidFilterError(
                        f"Invalid filter key '{key}' for model {model.__name__}"
                    )
                query = query.where(getattr(model, key) == value)
            result = await self.db.execute(query.limit(1))
            return result.scalars().first()
        except InvalidFilterError:
            raise
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                f"Failed to look up {model.__name__}",
                extra={"model": model.__name__, "filters": where, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during lookup: {str(e)}"
            ) from e


async def fetch_target(tx: Transaction, model: type, request: HookRequest) -> Any:
    """Load the record an update or delete targets.

    Raises:
        MissingIdError: If the request carries no id
        NotFoundError: If no record has that id
    """
    record_id = request.require_id(model.__name__)
    record = await tx.query_one(model, id=record_id)
    if record is None:
        raise NotFoundError(
            f"{model.__name__} with id={record_id} not found.",
            target="id",
            code="NOT_FOUND",
        )
    return record
