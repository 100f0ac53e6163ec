"""Repository port — abstract persistence interface per entity kind."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class RepositoryPort(ABC, Generic[T]):
    """
    Storage collaborator used by the catalog services.

    Lookups that miss return ``None`` (or raise ``NotFound`` from ``get``);
    storage failures propagate as the backend's own exceptions so callers can
    tell the two apart.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: int) -> T | None:
        ...

    @abstractmethod
    async def get(self, entity_id: int) -> T:
        """Like ``find_by_id`` but raises ``NotFound`` on a miss."""
        ...

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Every record, ordered by primary key ascending."""
        ...

    @abstractmethod
    async def find_by(self, *criteria: Any, order_by: Any = None, limit: int | None = None, **filters: Any) -> list[T]:
        ...

    @abstractmethod
    async def exists(self, entity_id: int) -> bool:
        ...

    @abstractmethod
    async def save(self, entity: T) -> T:
        ...

    @abstractmethod
    async def save_all(self, entities: Sequence[T]) -> list[T]:
        ...

    @abstractmethod
    async def delete(self, entity: T) -> None:
        ...

    @abstractmethod
    async def delete_by_id(self, entity_id: int) -> None:
        ...
