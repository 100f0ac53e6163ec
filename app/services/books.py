"""Book registration, lookup, maintenance and duplicate cleanup."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.api.schemas import BookCreateRequest, BookUpdateRequest
from app.config import settings
from app.domain.dedup import DedupResult, book_key, resolve_duplicates
from app.domain.errors import DuplicateIsbn, NotFound
from app.domain.isbn import validate_isbn
from app.domain.models import Author, Book

logger = logging.getLogger(__name__)


class BookService:
    """Catalog operations on books."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._books = SqlAlchemyRepository(session, Book, "book")
        self._authors = SqlAlchemyRepository(session, Author, "author")

    async def register_books(self, items: list[BookCreateRequest]) -> list[Book]:
        """
        Register a batch of books, in order.

        Each ISBN is validated and checked for uniqueness before the book is
        written. The first invalid item raises and aborts the rest of the
        batch; the surrounding unit of work discards what was already flushed.
        """
        registered: list[Book] = []
        for data in items:
            validate_isbn(data.isbn)
            await self._ensure_isbn_free(data.isbn)
            if data.author_id is not None:
                await self._authors.get(data.author_id)

            book = Book(**data.model_dump())
            try:
                await self._books.save(book)
            except IntegrityError as exc:
                raise DuplicateIsbn(data.isbn) from exc
            registered.append(book)

        logger.info("Registered %d book(s)", len(registered))
        return registered

    async def list_books(self) -> list[Book]:
        return await self._books.find_all()

    async def get_book(self, book_id: int) -> Book:
        return await self._books.get(book_id)

    async def get_book_by_isbn(self, isbn: str) -> Book:
        book = await self._books.find_one_by(isbn=isbn)
        if book is None:
            raise NotFound("book", isbn)
        return book

    async def update_book(self, book_id: int, data: BookUpdateRequest) -> Book:
        """Apply the fields that were provided; a new ISBN is re-validated."""
        book = await self._books.get(book_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)

        new_isbn = changes.pop("isbn", None)
        if new_isbn is not None and new_isbn != book.isbn:
            validate_isbn(new_isbn)
            await self._ensure_isbn_free(new_isbn)
            book.isbn = new_isbn

        author_id = changes.pop("author_id", None)
        if author_id is not None and author_id != book.author_id:
            await self._authors.get(author_id)
            book.author_id = author_id

        for field, value in changes.items():
            setattr(book, field, value)

        try:
            await self._books.save(book)
        except IntegrityError as exc:
            raise DuplicateIsbn(book.isbn) from exc
        logger.info("Updated book %d", book_id)
        return book

    async def delete_book(self, book_id: int) -> None:
        await self._books.delete_by_id(book_id)
        logger.info("Deleted book %d", book_id)

    async def books_by_author(self, author_id: int) -> list[Book]:
        await self._authors.get(author_id)
        return await self._books.find_by(author_id=author_id)

    async def books_by_genre(self, genre: str) -> list[Book]:
        books = await self._books.find_by(genre=genre)
        if not books:
            logger.warning("No books found for genre: %s", genre)
        return books

    async def top_sellers(self, limit: int | None = None) -> list[Book]:
        return await self._books.find_by(
            order_by=Book.copies_sold.desc(),
            limit=limit or settings.top_sellers_limit,
        )

    async def books_by_rating(self, min_rating: float) -> list[Book]:
        return await self._books.find_by(Book.rating >= min_rating)

    async def remove_duplicate_books(self) -> DedupResult[Book]:
        """
        Delete every book whose ISBN was already seen earlier in id order.

        Reads one snapshot; books inserted while the pass runs are not
        considered until the next pass.
        """
        result = resolve_duplicates(await self._books.find_all(), book_key)
        for book in result.removed:
            await self._books.delete(book)
        logger.info(
            "Book dedup: kept %d, removed %d", len(result.survivors), len(result.removed)
        )
        return result

    async def _ensure_isbn_free(self, isbn: str) -> None:
        if await self._books.find_one_by(isbn=isbn) is not None:
            raise DuplicateIsbn(isbn)
