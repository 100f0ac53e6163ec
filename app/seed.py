"""Sample catalog loaded at startup when ``SEED_SAMPLE_DATA`` is set."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import AuthorCreateRequest, BookCreateRequest
from app.services.authors import AuthorService
from app.services.books import BookService

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS = [
    AuthorCreateRequest(
        first_name="F. Scott",
        last_name="Fitzgerald",
        biography="Short biography of F. Scott Fitzgerald",
        publisher="Charles Scribner's Sons",
    ),
    AuthorCreateRequest(
        first_name="Harper",
        last_name="Lee",
        biography="Short biography of Harper Lee",
        publisher="J. B. Lippincott & Co.",
    ),
]

# One book per sample author, in the same order.
SAMPLE_BOOKS = [
    dict(
        isbn="9780743273565",
        title="The Great Gatsby",
        description="A novel set in the Roaring Twenties",
        price=20,
        genre="Fiction",
        publisher="Charles Scribner's Sons",
        year_published=1925,
        copies_sold=5_000_000,
    ),
    dict(
        isbn="9780061120084",
        title="To Kill a Mockingbird",
        description="A novel about innocence and experience, kindness and cruelty",
        price=15,
        genre="Historical Fiction",
        publisher="J. B. Lippincott & Co.",
        year_published=1960,
        copies_sold=3_000_000,
    ),
]


async def seed_catalog(session: AsyncSession) -> bool:
    """Load the sample authors and books into an empty catalog.

    Returns False, and writes nothing, if any book already exists.
    """
    books = BookService(session)
    if await books.list_books():
        logger.info("Catalog not empty, skipping sample data")
        return False

    authors = await AuthorService(session).register_authors(SAMPLE_AUTHORS)
    await books.register_books(
        [
            BookCreateRequest(author_id=author.id, **fields)
            for author, fields in zip(authors, SAMPLE_BOOKS)
        ]
    )
    logger.info("Seeded %d author(s) and %d book(s)", len(authors), len(SAMPLE_BOOKS))
    return True
