"""Base model class with primary key and timestamp tracking."""

import enum
from datetime import datetime
from typing import Any, Dict, List, Type

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from academic_records.utils.db import Base


def enum_values(enum_cls: Type[enum.Enum]) -> List[str]:
    """Persist enum members by value ('Draft') rather than by name ('DRAFT')."""
    return [member.value for member in enum_cls]


class BaseModel(Base):
    """Abstract base class for academic records models.

    Provides common functionality for all models:
    - Primary key (id)
    - Timestamps (created_at, updated_at)
    - Dictionary conversion

    Reads and writes go through the services in ``academic_records.services``,
    which run the lifecycle hooks before touching the session.

    Usage:
        class Subject(BaseModel):
            __tablename__ = "subjects"

            name: Mapped[str] = mapped_column(String(100), unique=True)
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    @classmethod
    def column_names(cls) -> set[str]:
        """Names of the mapped table columns."""
        return {column.name for column in cls.__table__.columns}

    def to_dict(self) -> Dict[str, Any]:
        """Convert model instance to dictionary.

        Returns:
            Dictionary representation of the model
        """
        return {
            column.name: getattr(self, column.name) for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        """String representation of the model."""
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key != "id"
        )
        return f"{self.__class__.__name__}(id={self.id}, {attrs})"
