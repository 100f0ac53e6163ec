"""Book comments."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.domain.models import Book, Comment, User


class CommentService:
    def __init__(self, session: AsyncSession) -> None:
        self._comments = SqlAlchemyRepository(session, Comment, "comment")
        self._books = SqlAlchemyRepository(session, Book, "book")
        self._users = SqlAlchemyRepository(session, User, "user")

    async def add_comment(self, user_id: int, book_id: int, text: str) -> Comment:
        await self._users.get(user_id)
        await self._books.get(book_id)
        return await self._comments.save(Comment(user_id=user_id, book_id=book_id, text=text))

    async def comments_for_book(self, book_id: int) -> list[Comment]:
        """Comments on a book, oldest first."""
        await self._books.get(book_id)
        return await self._comments.find_by(book_id=book_id)
