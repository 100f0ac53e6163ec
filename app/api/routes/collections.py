"""Shopping cart and wishlist routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    BookResponse,
    CartSubtotalResponse,
    WishlistCreateRequest,
    WishlistResponse,
)
from app.database import get_session
from app.services.cart import CartService
from app.services.wishlists import WishlistService

router = APIRouter(tags=["Collections"])


# ── Shopping cart ──────────────────────────────────


@router.post("/cart/{user_id}/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def add_to_cart(user_id: int, book_id: int, session: AsyncSession = Depends(get_session)) -> None:
    await CartService(session).add_book(user_id, book_id)


@router.delete("/cart/{user_id}/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_from_cart(
    user_id: int, book_id: int, session: AsyncSession = Depends(get_session)
) -> None:
    await CartService(session).remove_book(user_id, book_id)


@router.get("/cart/{user_id}/books", response_model=list[BookResponse])
async def cart_books(user_id: int, session: AsyncSession = Depends(get_session)) -> list:
    return await CartService(session).list_books(user_id)


@router.get("/cart/{user_id}/subtotal", response_model=CartSubtotalResponse)
async def cart_subtotal(
    user_id: int, session: AsyncSession = Depends(get_session)
) -> CartSubtotalResponse:
    subtotal = await CartService(session).subtotal(user_id)
    return CartSubtotalResponse(user_id=user_id, subtotal=subtotal)


# ── Wishlists ──────────────────────────────────────


@router.post("/wishlists", response_model=WishlistResponse, status_code=status.HTTP_201_CREATED)
async def create_wishlist(data: WishlistCreateRequest, session: AsyncSession = Depends(get_session)):
    return await WishlistService(session).create_wishlist(data.name, data.user_id)


@router.post("/wishlists/{wishlist_id}/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def add_to_wishlist(
    wishlist_id: int, book_id: int, session: AsyncSession = Depends(get_session)
) -> None:
    await WishlistService(session).add_book(wishlist_id, book_id)


@router.get("/wishlists/{wishlist_id}/books", response_model=list[BookResponse])
async def wishlist_books(wishlist_id: int, session: AsyncSession = Depends(get_session)) -> list:
    return await WishlistService(session).list_books(wishlist_id)


@router.post(
    "/wishlists/{wishlist_id}/books/{book_id}/move-to-cart",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def move_to_cart(
    wishlist_id: int, book_id: int, session: AsyncSession = Depends(get_session)
) -> None:
    """Move a book out of the wishlist and into the owner's cart, atomically."""
    await WishlistService(session).move_to_cart(wishlist_id, book_id)
