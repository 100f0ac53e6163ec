"""Publisher-wide price discounts."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.config import DiscountPolicy, settings
from app.domain.errors import NoMatchingRecords
from app.domain.models import Book
from app.domain.pricing import check_discount, discounted_price

logger = logging.getLogger(__name__)


class PricingService:
    def __init__(self, session: AsyncSession, policy: DiscountPolicy | None = None) -> None:
        self._books = SqlAlchemyRepository(session, Book, "book")
        self._policy = policy or settings.discount_policy

    async def apply_discount(self, publisher: str, percent: float) -> int:
        """
        Discount every book of ``publisher`` (exact, case-sensitive match).

        Prices are rounded half up. All books are written in one flush; an
        empty selection raises ``NoMatchingRecords`` and changes nothing.
        Returns the number of books updated.
        """
        check_discount(percent, self._policy)
        books = await self._books.find_by(publisher=publisher)
        if not books:
            raise NoMatchingRecords(f"publisher: {publisher}")

        for book in books:
            book.price = discounted_price(book.price, percent, self._policy)
        await self._books.save_all(books)

        logger.info("Applied %.2f%% discount to %d book(s) from %s", percent, len(books), publisher)
        return len(books)
