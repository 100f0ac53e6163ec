"""SQLAlchemy implementation of the repository port."""

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.domain.errors import ConcurrentUpdate, NotFound
from app.ports.repository import RepositoryPort

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyRepository(RepositoryPort[T]):
    """Repository over one ORM model, bound to the caller's session."""

    def __init__(self, session: AsyncSession, model: type[T], entity_name: str | None = None) -> None:
        self._session = session
        self._model = model
        self._entity = entity_name or model.__name__

    async def find_by_id(self, entity_id: int) -> T | None:
        return await self._session.get(self._model, entity_id)

    async def get(self, entity_id: int) -> T:
        entity = await self.find_by_id(entity_id)
        if entity is None:
            raise NotFound(self._entity, entity_id)
        return entity

    async def get_for_update(self, entity_id: int) -> T:
        """Fetch with a row lock (``SELECT ... FOR UPDATE`` where supported)."""
        result = await self._session.execute(
            select(self._model)
            .where(self._model.id == entity_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFound(self._entity, entity_id)
        return entity

    async def find_all(self) -> list[T]:
        result = await self._session.execute(select(self._model).order_by(self._model.id))
        return list(result.scalars().all())

    async def find_by(
        self, *criteria: Any, order_by: Any = None, limit: int | None = None, **filters: Any
    ) -> list[T]:
        stmt = select(self._model).where(*criteria).filter_by(**filters)
        stmt = stmt.order_by(order_by if order_by is not None else self._model.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_one_by(self, *criteria: Any, **filters: Any) -> T | None:
        result = await self._session.execute(
            select(self._model).where(*criteria).filter_by(**filters)
        )
        return result.scalars().first()

    async def exists(self, entity_id: int) -> bool:
        result = await self._session.execute(
            select(exists().where(self._model.id == entity_id))
        )
        return bool(result.scalar())

    async def save(self, entity: T) -> T:
        self._session.add(entity)
        await self._flush(entity)
        return entity

    async def save_all(self, entities: Sequence[T]) -> list[T]:
        self._session.add_all(entities)
        await self._flush()
        return list(entities)

    async def delete(self, entity: T) -> None:
        await self._session.delete(entity)
        await self._flush(entity)

    async def delete_by_id(self, entity_id: int) -> None:
        await self.delete(await self.get(entity_id))

    async def _flush(self, entity: Any = None) -> None:
        try:
            await self._session.flush()
        except StaleDataError as exc:
            logger.warning("Stale write rejected for %s: %s", self._entity, exc)
            raise ConcurrentUpdate(self._entity, getattr(entity, "id", None)) from exc
