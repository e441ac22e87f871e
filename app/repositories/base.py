"""Base repository for database operations."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
)


def is_unique_violation(error: IntegrityError) -> bool:
    """
    Tell unique-constraint violations apart from other integrity failures.

    PostgreSQL reports ``duplicate key value violates unique constraint``,
    SQLite ``UNIQUE constraint failed``.
    """
    error_msg = (str(error.orig) if error.orig else str(error)).lower()
    return "unique" in error_msg or "duplicate" in error_msg


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common read operations.

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

    async def get_by_id(self, record_id: int) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record ID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

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
            DatabaseConnectionError: For any other store failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if is_unique_violation(e):
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(
                detail=f"Failed to save record: {e}",
            ) from e
