"""Generic async repository: one SQL round trip per call, hard deletes."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

# Range of a 64-bit INTEGER column; larger ids cannot be bound, let alone stored
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Writes report the affected-row count instead of re-reading the row, so the
    caller decides what "nothing changed" means (usually a 404).
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list(self) -> list[ModelT]:
        """Return every row in storage order. No filtering, no paging."""
        q = select(self.model).execution_options(populate_existing=True)
        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    async def find_one(self, **predicate: Any) -> ModelT | None:
        """Return the first row whose columns equal all of *predicate*, or None."""
        q = select(self.model)
        for col_name, value in predicate.items():
            q = q.where(getattr(self.model, col_name) == value)
        result = await self._session.execute(q.limit(1))
        return result.scalars().first()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        return instance

    async def update(self, entity_id: int, **kwargs: Any) -> int:
        kwargs.pop("id", None)
        if not MIN_ID <= entity_id <= MAX_ID:
            return 0
        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
        )
        await self._session.flush()
        return result.rowcount

    async def delete(self, entity_id: int) -> int:
        if not MIN_ID <= entity_id <= MAX_ID:
            return 0
        result = await self._session.execute(
            delete(self.model)
            .where(self.model.id == entity_id)
        )
        await self._session.flush()
        return result.rowcount
