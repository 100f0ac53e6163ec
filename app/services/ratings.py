"""Rating submission and book rating aggregation."""

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.domain.errors import InvalidScore
from app.domain.models import Book, Rating, User

logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass
class RecordedRating:
    rating: Rating
    book_rating: float


class RatingService:
    """
    Keeps ``Book.rating`` equal to the mean of the book's rating scores.

    Two write paths exist and must not be confused:
      * ``record_rating`` stores a user's score and recomputes the mean.
      * ``override_rating`` is an administrative override that writes a value
        verbatim; the next ``record_rating`` replaces it with the true mean.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._books = SqlAlchemyRepository(session, Book, "book")
        self._users = SqlAlchemyRepository(session, User, "user")
        self._ratings = SqlAlchemyRepository(session, Rating, "rating")

    async def record_rating(self, user_id: int, book_id: int, score: int) -> RecordedRating:
        """Insert a rating, then recompute the book's mean including it."""
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise InvalidScore(score)
        await self._users.get(user_id)
        # Lock the book row so concurrent ratings recompute one after another.
        book = await self._books.get_for_update(book_id)

        rating = await self._ratings.save(Rating(user_id=user_id, book_id=book_id, score=score))
        average = await self._recompute(book)
        logger.info("User %d rated book %d: %d (mean now %.2f)", user_id, book_id, score, average)
        return RecordedRating(rating=rating, book_rating=average)

    async def recompute(self, book_id: int) -> float:
        """Recompute and persist a book's mean score; 0.0 when it has none."""
        book = await self._books.get_for_update(book_id)
        return await self._recompute(book)

    async def override_rating(self, book_id: int, value: float) -> Book:
        """Administrative override: store ``value`` as-is, no recomputation."""
        book = await self._books.get(book_id)
        book.rating = value
        await self._books.save(book)
        logger.warning("Rating of book %d overridden to %.2f", book_id, value)
        return book

    async def average_rating(self, book_id: int) -> float:
        """Mean score of a book without persisting it."""
        await self._books.get(book_id)
        return _mean(await self._scores(book_id))

    async def _recompute(self, book: Book) -> float:
        average = _mean(await self._scores(book.id))
        book.rating = average
        await self._books.save(book)
        return average

    async def _scores(self, book_id: int) -> list[int]:
        result = await self._session.execute(
            select(Rating.score).where(Rating.book_id == book_id).order_by(Rating.id)
        )
        return list(result.scalars().all())


def _mean(scores: list[int]) -> float:
    if not scores:
        return 0.0
    return sum(scores) / len(scores)
