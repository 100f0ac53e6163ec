"""Wishlists and the wishlist → cart transfer."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.repository.book_sets import wishlist_book_set
from app.adapters.repository.sqlalchemy import SqlAlchemyRepository
from app.domain.errors import AlreadyMember, DuplicateWishlistName, NotFound, NotMember
from app.domain.models import Book, User, Wishlist
from app.services.cart import CartService

logger = logging.getLogger(__name__)


class WishlistService:
    def __init__(self, session: AsyncSession) -> None:
        self._wishlists = SqlAlchemyRepository(session, Wishlist, "wishlist")
        self._users = SqlAlchemyRepository(session, User, "user")
        self._books = SqlAlchemyRepository(session, Book, "book")
        self._wishlist_books = wishlist_book_set(session)
        self._cart = CartService(session)

    async def create_wishlist(self, name: str, user_id: int) -> Wishlist:
        """Create a named wishlist. Names are unique per user."""
        await self._users.get(user_id)
        if await self._wishlists.find_one_by(user_id=user_id, name=name) is not None:
            raise DuplicateWishlistName(name, user_id)
        try:
            wishlist = await self._wishlists.save(Wishlist(name=name, user_id=user_id))
        except IntegrityError as exc:
            raise DuplicateWishlistName(name, user_id) from exc
        logger.info("Created wishlist %d (%s) for user %d", wishlist.id, name, user_id)
        return wishlist

    async def add_book(self, wishlist_id: int, book_id: int) -> None:
        await self._wishlists.get(wishlist_id)
        await self._books.get(book_id)
        if await self._wishlist_books.contains(wishlist_id, book_id):
            raise AlreadyMember("wishlist", wishlist_id, book_id)
        await self._wishlist_books.add(wishlist_id, book_id)

    async def list_books(self, wishlist_id: int) -> list[Book]:
        await self._wishlists.get(wishlist_id)
        return await self._wishlist_books.books(wishlist_id)

    async def move_to_cart(self, wishlist_id: int, book_id: int) -> None:
        """
        Move a book from a wishlist into its owner's shopping cart.

        Preconditions are checked in order (wishlist, book, membership) before
        anything is written. The removal and the cart placement share the
        caller's unit of work: if the cart step fails the removal is rolled
        back with it. Other wishlists holding the same book are untouched.
        """
        wishlist = await self._wishlists.get(wishlist_id)
        await self._books.get(book_id)
        if not await self._wishlist_books.contains(wishlist_id, book_id):
            raise NotMember("wishlist", wishlist_id, book_id)
        if wishlist.user_id is None:
            raise NotFound("user", None)

        await self._wishlist_books.remove(wishlist_id, book_id)
        await self._cart.place_book(wishlist.user_id, book_id)
        logger.info(
            "Moved book %d from wishlist %d to cart of user %d",
            book_id,
            wishlist_id,
            wishlist.user_id,
        )
