"""Generic resource service: the CRUD contract every resource shares.

Subclasses pick the repository, the entity label used in error messages, and
override ``_validate`` / ``_create_fields`` / ``_update_fields`` where the
resource has its own rules.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.repositories.base import BaseRepository, ModelT

logger = logging.getLogger(__name__)


class ResourceService(Generic[ModelT]):
    repository_class: ClassVar[type[BaseRepository]]
    entity: ClassVar[str]

    def __init__(self, session: AsyncSession):
        self._repo: BaseRepository[ModelT] = self.repository_class(session)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _validate(self, data: BaseModel) -> None:
        """Reject bad input before touching storage. Pass-through by default."""

    def _create_fields(self, data: BaseModel) -> dict[str, Any]:
        return data.model_dump()

    def _update_fields(self, data: BaseModel) -> dict[str, Any]:
        return data.model_dump()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list(self) -> list[ModelT]:
        return await self._repo.list()

    async def create(self, data: BaseModel) -> ModelT:
        self._validate(data)
        instance = await self._repo.create(**self._create_fields(data))
        logger.info("%s %s created", self.entity, instance.id)
        return instance

    async def update(self, entity_id: int, data: BaseModel) -> dict[str, Any]:
        """Apply *data* and echo it back with the id; the row is not re-read."""
        self._validate(data)
        fields = self._update_fields(data)
        affected = await self._repo.update(entity_id, **fields)
        if not affected:
            logger.warning("%s %s not found for update", self.entity, entity_id)
            raise NotFoundError(self.entity)
        logger.info("%s %s updated", self.entity, entity_id)
        return {"id": entity_id, **fields}

    async def delete(self, entity_id: int) -> None:
        affected = await self._repo.delete(entity_id)
        if not affected:
            logger.warning("%s %s not found for delete", self.entity, entity_id)
            raise NotFoundError(self.entity)
        logger.info("%s %s deleted", self.entity, entity_id)
