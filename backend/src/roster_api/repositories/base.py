"""Base repository with common database operations."""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from roster_api.models.orm.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Base repository with find/insert/update/delete by id."""

    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def get(self, id: UUID) -> T | None:
        """Get a record by ID.

        Args:
            id: Record UUID

        Returns:
            Record or None if not found
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs: Any) -> T:
        """Insert a new record and flush it so constraint violations surface here.

        Args:
            **kwargs: Field values

        Returns:
            Created record

        Raises:
            IntegrityError: If a unique or foreign key constraint is violated
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, instance: T, changes: Mapping[str, Any]) -> T:
        """Apply field changes to a loaded record.

        Unknown keys are ignored.

        Args:
            instance: Record to modify
            changes: Mapping of attribute name to new value

        Returns:
            Updated record

        Raises:
            IntegrityError: If a unique constraint is violated
        """
        for key, value in changes.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, instance: T) -> None:
        """Delete a loaded record."""
        await self.session.delete(instance)
        await self.session.flush()
