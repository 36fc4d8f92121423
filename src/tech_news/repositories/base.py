"""Generic CRUD helpers shared by the per-type repositories."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tech_news.db.session import Base

ModelT = TypeVar("ModelT", bound=Base)

__all__ = ["CrudRepository"]


class CrudRepository(Generic[ModelT]):
    """Thin wrapper around database access for one mapped class.

    Subclasses set ``model`` and add queries specific to their record type.
    Update and delete return the number of affected rows so callers can
    tell a missing id apart from a successful write.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository with an async SQLAlchemy session."""
        self.session = session

    async def list_all(self) -> list[ModelT]:
        """Return every row ordered by primary key."""
        result = await self.session.execute(
            select(self.model).order_by(self.model.id)  # type: ignore[attr-defined]
        )
        return list(result.scalars())

    async def get_by_id(self, record_id: int) -> ModelT | None:
        """Return a row by identifier."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == record_id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def add(self, record: ModelT) -> ModelT:
        """Stage ``record`` and flush so its primary key is assigned."""
        self.session.add(record)
        await self.session.flush()
        return record

    async def update_by_id(self, record_id: int, values: Mapping[str, Any]) -> int:
        """Apply ``values`` to the row with ``record_id``; return affected rows."""
        if not values:
            exists = await self.get_by_id(record_id)
            return 1 if exists is not None else 0
        result = await self.session.execute(
            update(self.model)
            .where(self.model.id == record_id)  # type: ignore[attr-defined]
            .values(**values)
            .execution_options(synchronize_session="evaluate")
        )
        return int(result.rowcount or 0)

    async def delete_by_id(self, record_id: int) -> int:
        """Hard-delete the row with ``record_id``; return affected rows."""
        result = await self.session.execute(
            delete(self.model)
            .where(self.model.id == record_id)  # type: ignore[attr-defined]
            .execution_options(synchronize_session=False)
        )
        return int(result.rowcount or 0)
