from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import AuthorCreateRequest, BookCreateRequest, UserCreateRequest
from app.database import build_engine, build_session_factory, get_session, unit_of_work
from app.domain.models import Base
from app.main import app
from app.services.authors import AuthorService
from app.services.books import BookService
from app.services.users import UserService

# Valid ISBN-13s (real books), handy for fixtures.
ISBNS = [
    "9780306406157",
    "9780262033848",
    "9780131103627",
    "9780201633610",
    "9780596007126",
]


@pytest.fixture
async def engine(tmp_path):
    """A fresh SQLite database per test (override in CI with a real PG URL)."""
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session that is never committed; everything is discarded afterwards."""
    async with session_factory() as s:
        yield s


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def _session_override():
        async with unit_of_work(session_factory) as s:
            yield s

    app.dependency_overrides[get_session] = _session_override
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_book(session):
    async def _make(isbn: str, **fields):
        fields.setdefault("title", f"Book {isbn}")
        books = await BookService(session).register_books([BookCreateRequest(isbn=isbn, **fields)])
        return books[0]

    return _make


@pytest.fixture
def make_user(session):
    async def _make(username: str = "reader"):
        return await UserService(session).create_user(
            UserCreateRequest(username=username, password="securepass123")
        )

    return _make


@pytest.fixture
def make_author(session):
    async def _make(first_name: str, last_name: str, publisher: str | None = None):
        return await AuthorService(session).register_author(
            AuthorCreateRequest(first_name=first_name, last_name=last_name, publisher=publisher)
        )

    return _make
