"""Author registration and duplicate cleanup."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.api.schemas import AuthorCreateRequest
from app.domain.dedup import DedupResult, author_key, resolve_duplicates
from app.domain.models import Author

logger = logging.getLogger(__name__)


class AuthorService:
    def __init__(self, session: AsyncSession) -> None:
        self._authors = SqlAlchemyRepository(session, Author, "author")

    async def register_author(self, data: AuthorCreateRequest) -> Author:
        author = await self._authors.save(Author(**data.model_dump()))
        logger.info("Registered author %d (%s %s)", author.id, author.first_name, author.last_name)
        return author

    async def register_authors(self, items: list[AuthorCreateRequest]) -> list[Author]:
        authors = await self._authors.save_all([Author(**data.model_dump()) for data in items])
        logger.info("Registered %d author(s)", len(authors))
        return authors

    async def list_authors(self) -> list[Author]:
        return await self._authors.find_all()

    async def get_author(self, author_id: int) -> Author:
        return await self._authors.get(author_id)

    async def remove_duplicate_authors(self) -> DedupResult[Author]:
        """
        Keep the lowest-id author per (first name, last name, publisher).

        Books of a removed author go with it through the ``ON DELETE CASCADE``
        foreign key; they are not reassigned to the survivor.
        """
        result = resolve_duplicates(await self._authors.find_all(), author_key)
        for author in result.removed:
            await self._authors.delete(author)
        logger.info(
            "Author dedup: kept %d, removed %d", len(result.survivors), len(result.removed)
        )
        return result
