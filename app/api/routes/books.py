"""Book catalog routes."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    AverageRatingResponse,
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
    DedupResponse,
    DiscountRequest,
    DiscountResponse,
    RatingOverrideRequest,
)
from app.database import get_session
from app.services.books import BookService
from app.services.pricing import PricingService
from app.services.ratings import RatingService

router = APIRouter(prefix="/books", tags=["Books"])


# Fixed paths are declared before /{book_id} so they are matched first.


@router.get("/top-sellers", response_model=list[BookResponse])
async def top_sellers(session: AsyncSession = Depends(get_session)) -> list:
    return await BookService(session).top_sellers()


@router.get("/by-rating", response_model=list[BookResponse])
async def books_by_rating(
    min_rating: float = Query(ge=0, le=5),
    session: AsyncSession = Depends(get_session),
) -> list:
    return await BookService(session).books_by_rating(min_rating)


@router.get("/genre/{genre}", response_model=list[BookResponse])
async def books_by_genre(genre: str, session: AsyncSession = Depends(get_session)) -> list:
    return await BookService(session).books_by_genre(genre)


@router.get("/isbn/{isbn}", response_model=BookResponse)
async def get_book_by_isbn(isbn: str, session: AsyncSession = Depends(get_session)):
    return await BookService(session).get_book_by_isbn(isbn)


@router.put("/discount", response_model=DiscountResponse)
async def apply_discount(
    data: DiscountRequest, session: AsyncSession = Depends(get_session)
) -> DiscountResponse:
    """Discount every book of a publisher by a percentage."""
    updated = await PricingService(session).apply_discount(data.publisher, data.percent)
    return DiscountResponse(publisher=data.publisher, percent=data.percent, updated=updated)


@router.post("/remove-duplicates", response_model=DedupResponse)
async def remove_duplicate_books(session: AsyncSession = Depends(get_session)) -> DedupResponse:
    result = await BookService(session).remove_duplicate_books()
    return DedupResponse(kept=len(result.survivors), removed=[b.id for b in result.removed])


@router.get("", response_model=list[BookResponse])
async def list_books(session: AsyncSession = Depends(get_session)) -> list:
    return await BookService(session).list_books()


@router.post("", response_model=list[BookResponse], status_code=status.HTTP_201_CREATED)
async def register_books(
    items: list[BookCreateRequest], session: AsyncSession = Depends(get_session)
) -> list:
    """Register one or more books. Any invalid book rejects the whole batch."""
    return await BookService(session).register_books(items)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: int, session: AsyncSession = Depends(get_session)):
    return await BookService(session).get_book(book_id)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int, data: BookUpdateRequest, session: AsyncSession = Depends(get_session)
):
    return await BookService(session).update_book(book_id, data)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(book_id: int, session: AsyncSession = Depends(get_session)) -> None:
    await BookService(session).delete_book(book_id)


@router.put("/{book_id}/rating", response_model=BookResponse)
async def override_rating(
    book_id: int, data: RatingOverrideRequest, session: AsyncSession = Depends(get_session)
):
    """Administrative override of the stored rating (no recomputation)."""
    return await RatingService(session).override_rating(book_id, data.rating)


@router.get("/{book_id}/average-rating", response_model=AverageRatingResponse)
async def average_rating(
    book_id: int, session: AsyncSession = Depends(get_session)
) -> AverageRatingResponse:
    average = await RatingService(session).average_rating(book_id)
    return AverageRatingResponse(book_id=book_id, average_rating=average)
