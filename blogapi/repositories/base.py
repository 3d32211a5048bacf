"""Base repository for database operations."""

from datetime import UTC, datetime
from logging import getLogger
from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from blogapi.configs import file_logger
from blogapi.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)

logger = file_logger(getLogger(__name__))

ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Base repository implementing common persistence operations.

    Subclasses set `model` and add their own finders. Writes are flushed,
    never committed: the request-scoped session owns the transaction.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_id(self, record_id: int) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record primary key

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_all(self) -> list[ModelT]:
        """
        Get all records ordered by primary key.

        Returns:
            list[ModelT]: List of records
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).order_by(id_column)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def save(self, record: ModelT) -> ModelT:
        """
        Insert or update a record.

        Existing records get their `updated_at` stamped before the flush.

        Args:
            record: Record to persist

        Returns:
            ModelT: Refreshed record (with its assigned ID)
        """
        if getattr(record, self.id_field) is not None and hasattr(record, "updated_at"):
            record.updated_at = datetime.now(tz=UTC).replace(microsecond=0)
        return await self._add_and_refresh(record)

    async def delete(self, record: ModelT) -> None:
        """
        Delete a record.

        Args:
            record: Record to delete
        """
        try:
            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to delete {self.model.__name__}")
            raise DatabaseConnectionError from e

    async def count(self) -> int:
        """
        Count total records.

        Returns:
            int: Total number of records
        """
        statement = select(func.count()).select_from(self.model)
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            logger.warning(f"Integrity error saving {self.model.__name__}: {error_msg}")
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError from e
            raise DatabaseError from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to save {self.model.__name__}")
            raise DatabaseConnectionError from e
