"""Base service running lifecycle hooks around transactional writes."""

import logging
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from academic_records.exceptions import (
    ConstraintViolationError,
    DatabaseConnectionError,
    DuplicateKeyError,
    InvalidFilterError,
    RecordNotFoundError,
    RuleViolation,
)
from academic_records.hooks import (
    Event,
    HookRegistry,
    HookRequest,
    SessionTransaction,
    registry,
)
from academic_records.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# SQLSTATE codes and classes (PostgreSQL)
UNIQUE_VIOLATION = "23505"
INTEGRITY_CLASS = "23"
DATA_EXCEPTION_CLASS = "22"


def _sqlstate(error: DBAPIError) -> Optional[str]:
    """SQLSTATE reported by the driver, if any."""
    for source in (error.orig, getattr(error.orig, "__cause__", None)):
        sqlstate = getattr(source, "sqlstate", None) or getattr(
            source, "pgcode", None
        )
        if sqlstate:
            return sqlstate
    return None


def _is_unique_violation(error: DBAPIError) -> bool:
    """Whether a database error comes from a unique constraint."""
    sqlstate = _sqlstate(error)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    return isinstance(error, IntegrityError) and "unique" in str(error.orig).lower()


def _is_rejected_value(error: Exception) -> bool:
    """Whether the database refused a value rather than failed to run."""
    if isinstance(error, (IntegrityError, DataError)):
        return True
    if isinstance(error, DBAPIError):
        # asyncpg surfaces data exceptions as plain DBAPIError
        sqlstate = _sqlstate(error) or ""
        return sqlstate[:2] in (INTEGRITY_CLASS, DATA_EXCEPTION_CLASS)
    return False


class BaseService(Generic[T]):
    """Base service validating and persisting one model.

    Every write first runs the ``before`` hook registered for the model and
    event, on the same session the write uses:
    - Write operations (create, update, delete) commit once the hook accepts
    - Read operations (get_by_id, get_all, find) don't commit
    - Rejections and database errors roll the session back

    Usage:
        class SubjectService(BaseService[Subject]):
            model = Subject

        service = SubjectService(db_session)
        subject = await service.create({"name": "  Algebra   Lineal "})
        # subject.name == "Algebra Lineal"

    Attributes:
        db: Database session for operations
        model: Model class this service manages
        hooks: Hook registry consulted before writes
    """

    model: type[T]

    def __init__(self, db: AsyncSession, hooks: Optional[HookRegistry] = None) -> None:
        """Initialize service with database session.

        Args:
            db: Database session for operations
            hooks: Hook registry, defaults to the application registry
        """
        self.db = db
        self.hooks = hooks if hooks is not None else registry

    @property
    def entity(self) -> str:
        return self.model.__name__

    async def _run_hook(self, event: Event, request: HookRequest) -> None:
        await self.hooks.run(event, self.entity, SessionTransaction(self.db), request)

    def _writable(self, data: dict[str, Any]) -> dict[str, Any]:
        """Drop keys that are not columns, and the primary key."""
        columns = self.model.column_names()
        return {
            key: value
            for key, value in data.items()
            if key in columns and key != "id"
        }

    async def _db_error(
        self, operation: str, error: Exception, **context: Any
    ) -> Exception:
        """Roll back and translate a database error into the exception to raise."""
        await self.db.rollback()
        logger.error(
            f"Failed to {operation} {self.entity}",
            extra={"model": self.entity, "error": str(error), **context},
            exc_info=True,
        )
        if isinstance(error, DBAPIError) and _is_unique_violation(error):
            # Concurrent writer won the race past the hook's uniqueness check
            return DuplicateKeyError(
                f"{self.entity} conflicts with an existing record.",
                code="CONSTRAINT_VIOLATION",
            )
        if _is_rejected_value(error):
            return ConstraintViolationError(
                f"{self.entity} has a value the database rejected.",
                code="INVALID_VALUE",
            )
        return DatabaseConnectionError(
            f"Database error during {operation}: {str(error)}"
        )

    async def create(self, data: dict[str, Any]) -> T:
        """Validate, create and commit a new record.

        Args:
            data: Field values; hooks may normalize or default them

        Returns:
            Created model instance

        Raises:
            RuleViolation: If the create hook rejects the change
            DuplicateKeyError: If a unique constraint is violated
            ConstraintViolationError: If another constraint rejects a value
            DatabaseConnectionError: If database operation fails
        """
        request = HookRequest(data=dict(data))
        try:
            await self._run_hook(Event.CREATE, request)
            instance = self.model(**self._writable(request.data))
            self.db.add(instance)
            await self.db.flush()
            await self.db.refresh(instance)
            await self.db.commit()
            logger.debug(
                f"Created {self.entity}",
                extra={"model": self.entity, "id": instance.id},
            )
            return instance
        except (RuleViolation, DatabaseConnectionError):
            await self.db.rollback()
            raise
        except (DBAPIError, SQLAlchemyError) as e:
            raise await self._db_error("create", e) from e

    async def get_by_id(self, record_id: int) -> Optional[T]:
        """Retrieve a record by its primary key ID.

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                f"Failed to get {self.entity} by id",
                extra={"model": self.entity, "id": record_id, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(f"Database error during get: {str(e)}") from e

    async def get_by_id_or_fail(self, record_id: int) -> T:
        """Retrieve a record by ID or raise exception if not found.

        Raises:
            RecordNotFoundError: If record not found
            DatabaseConnectionError: If database operation fails
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(self.entity, record_id)
        return record

    async def get_all(
        self, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> List[T]:
        """Retrieve all records ordered by id, with optional pagination.

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            query = select(self.model).order_by(self.model.id)
            if offset:
                query = query.offset(offset)
            if limit:
                query = query.limit(limit)
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                f"Failed to get all {self.entity}",
                extra={"model": self.entity, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during get_all: {str(e)}"
            ) from e

    async def find(self, **filters: Any) -> List[T]:
        """Find records matching the given equality filters.

        Raises:
            InvalidFilterError: If invalid filter key provided
            DatabaseConnectionError: If database operation fails
        """
        try:
            query = select(self.model)
            for key, value in filters.items():
                if not hasattr(self.model, key):
                    raise InvalidFilterError(
                        f"Invalid filter key '{key}' for model {self.entity}"
                    )
                query = query.where(getattr(self.model, key) == value)
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except InvalidFilterError:
            raise
        except (DBAPIError, SQLAlchemyError) as e:
            logger.error(
                f"Failed to find {self.entity}",
                extra={"model": self.entity, "filters": filters, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during find: {str(e)}"
            ) from e

    async def update(self, record_id: Optional[int], data: dict[str, Any]) -> T:
        """Validate and apply a partial update, then commit.

        The target is the payload ``id`` when present, else ``record_id``.

        Args:
            record_id: Id from the request path
            data: Fields to change

        Returns:
            Updated model instance

        Raises:
            RuleViolation: If the update hook rejects the change
            RecordNotFoundError: If no hook guards the model and the record is missing
            DuplicateKeyError: If a unique constraint is violated
            ConstraintViolationError: If another constraint rejects a value
            DatabaseConnectionError: If database operation fails
        """
        request = HookRequest.for_record(dict(data), path_id=record_id)
        try:
            await self._run_hook(Event.UPDATE, request)
            record = await self.get_by_id_or_fail(request.require_id(self.entity))
            for key, value in self._writable(request.data).items():
                setattr(record, key, value)
            await self.db.flush()
            await self.db.refresh(record)
            await self.db.commit()
            logger.debug(
                f"Updated {self.entity}",
                extra={"model": self.entity, "id": record.id},
            )
            return record
        except (RuleViolation, RecordNotFoundError, DatabaseConnectionError):
            await self.db.rollback()
            raise
        except (DBAPIError, SQLAlchemyError) as e:
            raise await self._db_error("update", e, id=record_id) from e

    async def delete(self, record_id: int) -> None:
        """Validate and delete a record, then commit.

        Raises:
            RuleViolation: If the delete hook rejects the change
            RecordNotFoundError: If no hook guards the model and the record is missing
            DatabaseConnectionError: If database operation fails
        """
        request = HookRequest.for_record({}, path_id=record_id)
        try:
            await self._run_hook(Event.DELETE, request)
            record = await self.get_by_id_or_fail(record_id)
            await self.db.delete(record)
            await self.db.flush()
            await self.db.commit()
            logger.debug(
                f"Deleted {self.entity}",
                extra={"model": self.entity, "id": record_id},
            )
        except (RuleViolation, RecordNotFoundError, DatabaseConnectionError):
            await self.db.rollback()
            raise
        except (DBAPIError, SQLAlchemyError) as e:
            raise await self._db_error("delete", e, id=record_id) from e
