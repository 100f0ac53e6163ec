"""Tests for wishlists, the shopping cart and the wishlist → cart transfer."""

import pytest
from sqlalchemy import func, select

from app.api.schemas import BookCreateRequest, UserCreateRequest
from app.database import unit_of_work
from app.domain.errors import AlreadyMember, DuplicateWishlistName, NotFound, NotMember
from app.domain.models import ShoppingCart, Wishlist
from app.services.books import BookService
from app.services.cart import CartService
from app.services.users import UserService
from app.services.wishlists import WishlistService
from tests.conftest import ISBNS


def ids(books) -> list[int]:
    return [b.id for b in books]


@pytest.mark.asyncio
async def test_move_to_cart(session, make_book, make_user):
    book = await make_book(ISBNS[0])
    user = await make_user()
    wishlists = WishlistService(session)
    wishlist = await wishlists.create_wishlist("Summer", user.id)
    await wishlists.add_book(wishlist.id, book.id)
    assert await CartService(session).list_books(user.id) == []

    await wishlists.move_to_cart(wishlist.id, book.id)

    assert await wishlists.list_books(wishlist.id) == []
    assert ids(await CartService(session).list_books(user.id)) == [book.id]

    with pytest.raises(NotMember):
        await wishlists.move_to_cart(wishlist.id, book.id)


@pytest.mark.asyncio
async def test_move_only_touches_the_given_wishlist(session, make_book, make_user):
    book = await make_book(ISBNS[0])
    user = await make_user()
    wishlists = WishlistService(session)
    summer = await wishlists.create_wishlist("Summer", user.id)
    winter = await wishlists.create_wishlist("Winter", user.id)
    await wishlists.add_book(summer.id, book.id)
    await wishlists.add_book(winter.id, book.id)

    await wishlists.move_to_cart(summer.id, book.id)

    assert ids(await wishlists.list_books(winter.id)) == [book.id]


@pytest.mark.asyncio
async def test_move_when_book_already_in_cart(session, make_book, make_user):
    book = await make_book(ISBNS[0])
    user = await make_user()
    cart = CartService(session)
    wishlists = WishlistService(session)
    wishlist = await wishlists.create_wishlist("Summer", user.id)
    await wishlists.add_book(wishlist.id, book.id)
    await cart.add_book(user.id, book.id)

    await wishlists.move_to_cart(wishlist.id, book.id)

    assert ids(await cart.list_books(user.id)) == [book.id]
    assert await session.scalar(select(func.count(ShoppingCart.id))) == 1


@pytest.mark.asyncio
async def test_move_preconditions_in_order(session, make_book, make_user):
    book = await make_book(ISBNS[0])
    user = await make_user()
    wishlists = WishlistService(session)
    wishlist = await wishlists.create_wishlist("Summer", user.id)

    with pytest.raises(NotFound) as excinfo:
        await wishlists.move_to_cart(9999, 9999)
    assert excinfo.value.entity == "wishlist"

    with pytest.raises(NotFound) as excinfo:
        await wishlists.move_to_cart(wishlist.id, 9999)
    assert excinfo.value.entity == "book"

    with pytest.raises(NotMember):
        await wishlists.move_to_cart(wishlist.id, book.id)


@pytest.mark.asyncio
async def test_failed_cart_step_rolls_back_wishlist_removal(session_factory, monkeypatch):
    async with unit_of_work(session_factory) as setup:
        [book] = await BookService(setup).register_books(
            [BookCreateRequest(isbn=ISBNS[0], title="Atomic")]
        )
        user = await UserService(setup).create_user(
            UserCreateRequest(username="reader", password="securepass123")
        )
        wishlist = await WishlistService(setup).create_wishlist("Summer", user.id)
        await WishlistService(setup).add_book(wishlist.id, book.id)

    async def broken_place_book(self, user_id, book_id):
        raise RuntimeError("cart storage unavailable")

    monkeypatch.setattr(CartService, "place_book", broken_place_book)

    with pytest.raises(RuntimeError):
        async with unit_of_work(session_factory) as session:
            await WishlistService(session).move_to_cart(wishlist.id, book.id)

    async with session_factory() as check:
        assert ids(await WishlistService(check).list_books(wishlist.id)) == [book.id]
        assert await check.scalar(select(func.count(ShoppingCart.id))) == 0


@pytest.mark.asyncio
async def test_ownerless_wishlist_cannot_move(session_factory):
    async with unit_of_work(session_factory) as setup:
        [book] = await BookService(setup).register_books(
            [BookCreateRequest(isbn=ISBNS[0], title="Orphan")]
        )
        user = await UserService(setup).create_user(
            UserCreateRequest(username="leaver", password="securepass123")
        )
        wishlist = await WishlistService(setup).create_wishlist("Summer", user.id)
        await WishlistService(setup).add_book(wishlist.id, book.id)
        await CartService(setup).add_book(user.id, book.id)

    async with unit_of_work(session_factory) as session:
        await UserService(session).delete_user(user.id)

    async with session_factory() as check:
        # The cart died with its owner; the wishlist did not.
        assert await check.scalar(select(func.count(ShoppingCart.id))) == 0
        kept = await check.get(Wishlist, wishlist.id)
        assert kept is not None
        assert kept.user_id is None

        with pytest.raises(NotFound) as excinfo:
            await WishlistService(check).move_to_cart(wishlist.id, book.id)
        assert excinfo.value.entity == "user"
        assert ids(await WishlistService(check).list_books(wishlist.id)) == [book.id]


# ── Wishlist and cart bookkeeping ──────────────────


@pytest.mark.asyncio
async def test_wishlist_names_unique_per_user(session, make_user):
    alice = await make_user("alice")
    bob = await make_user("bob")
    wishlists = WishlistService(session)
    await wishlists.create_wishlist("Favourites", alice.id)
    await wishlists.create_wishlist("Favourites", bob.id)

    with pytest.raises(DuplicateWishlistName):
        await wishlists.create_wishlist("Favourites", alice.id)


@pytest.mark.asyncio
async def test_add_book_twice_to_wishlist(session, make_book, make_user):
    book = await make_book(ISBNS[0])
    user = await make_user()
    wishlists = WishlistService(session)
    wishlist = await wishlists.create_wishlist("Summer", user.id)
    await wishlists.add_book(wishlist.id, book.id)

    with pytest.raises(AlreadyMember):
        await wishlists.add_book(wishlist.id, book.id)


@pytest.mark.asyncio
async def test_cart_subtotal_and_removal(session, make_book, make_user):
    first = await make_book(ISBNS[0], price=20)
    second = await make_book(ISBNS[1], price=15)
    user = await make_user()
    cart = CartService(session)
    assert await cart.subtotal(user.id) == 0

    await cart.add_book(user.id, first.id)
    await cart.add_book(user.id, second.id)
    await cart.add_book(user.id, second.id)
    assert await cart.subtotal(user.id) == 35

    await cart.remove_book(user.id, first.id)
    assert ids(await cart.list_books(user.id)) == [second.id]

    with pytest.raises(NotMember):
        await cart.remove_book(user.id, first.id)
