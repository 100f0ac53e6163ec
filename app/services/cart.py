"""Shopping cart: one lazily created cart per user."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.book_sets import cart_book_set
from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.domain.errors import NotMember
from app.domain.models import Book, ShoppingCart, User

logger = logging.getLogger(__name__)


class CartService:
    def __init__(self, session: AsyncSession) -> None:
        self._carts = SqlAlchemyRepository(session, ShoppingCart, "shopping cart")
        self._users = SqlAlchemyRepository(session, User, "user")
        self._books = SqlAlchemyRepository(session, Book, "book")
        self._cart_books = cart_book_set(session)

    async def add_book(self, user_id: int, book_id: int) -> None:
        await self._users.get(user_id)
        await self._books.get(book_id)
        await self.place_book(user_id, book_id)

    async def place_book(self, user_id: int, book_id: int) -> ShoppingCart:
        """
        Put a book into the user's cart, creating the cart on first use.

        The cart is a set: placing a book that is already there is a no-op.
        Callers must have checked that the user and the book exist.
        """
        cart = await self._carts.find_one_by(user_id=user_id)
        if cart is None:
            cart = await self._carts.save(ShoppingCart(user_id=user_id))
            logger.info("Created shopping cart %d for user %d", cart.id, user_id)

        if not await self._cart_books.contains(cart.id, book_id):
            await self._cart_books.add(cart.id, book_id)
            logger.info("Book %d added to cart of user %d", book_id, user_id)
        return cart

    async def remove_book(self, user_id: int, book_id: int) -> None:
        await self._users.get(user_id)
        await self._books.get(book_id)
        cart = await self._carts.find_one_by(user_id=user_id)
        if cart is None or not await self._cart_books.remove(cart.id, book_id):
            raise NotMember("shopping cart of user", user_id, book_id)
        logger.info("Book %d removed from cart of user %d", book_id, user_id)

    async def list_books(self, user_id: int) -> list[Book]:
        await self._users.get(user_id)
        cart = await self._carts.find_one_by(user_id=user_id)
        if cart is None:
            return []
        return await self._cart_books.books(cart.id)

    async def subtotal(self, user_id: int) -> int:
        """Sum of the prices of the books in the cart (0 without a cart)."""
        return sum(book.price for book in await self.list_books(user_id))
