"""Book sets held by reference: wishlist and cart membership tables."""

from sqlalchemy import Table, delete, exists, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models import Book, cart_books, wishlist_books


class BookSetRepository:
    """Membership rows linking an owner (wishlist or cart) to book ids."""

    def __init__(self, session: AsyncSession, table: Table, owner_column: str) -> None:
        self._session = session
        self._table = table
        self._owner = table.c[owner_column]
        self._book = table.c.book_id

    async def contains(self, owner_id: int, book_id: int) -> bool:
        result = await self._session.execute(
            select(exists().where(self._owner == owner_id, self._book == book_id))
        )
        return bool(result.scalar())

    async def add(self, owner_id: int, book_id: int) -> None:
        await self._session.execute(
            insert(self._table).values({self._owner.key: owner_id, self._book.key: book_id})
        )

    async def remove(self, owner_id: int, book_id: int) -> int:
        result = await self._session.execute(
            delete(self._table).where(self._owner == owner_id, self._book == book_id)
        )
        return result.rowcount

    async def books(self, owner_id: int) -> list[Book]:
        result = await self._session.execute(
            select(Book)
            .join(self._table, self._book == Book.id)
            .where(self._owner == owner_id)
            .order_by(Book.id)
        )
        return list(result.scalars().all())


def wishlist_book_set(session: AsyncSession) -> BookSetRepository:
    return BookSetRepository(session, wishlist_books, "wishlist_id")


def cart_book_set(session: AsyncSession) -> BookSetRepository:
    return BookSetRepository(session, cart_books, "cart_id")
