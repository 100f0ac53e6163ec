"""Rating and comment routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import (
    CommentCreateRequest,
    CommentResponse,
    RatingCreateRequest,
    RatingResponse,
)
from app.database import get_session
from app.services.comments import CommentService
from app.services.ratings import RatingService

router = APIRouter(tags=["Reviews"])


@router.post("/ratings", response_model=RatingResponse, status_code=status.HTTP_201_CREATED)
async def record_rating(
    data: RatingCreateRequest, session: AsyncSession = Depends(get_session)
) -> RatingResponse:
    """Store a user's score and refresh the book's average rating."""
    recorded = await RatingService(session).record_rating(data.user_id, data.book_id, data.score)
    rating = recorded.rating
    return RatingResponse(
        id=rating.id,
        user_id=rating.user_id,
        book_id=rating.book_id,
        score=rating.score,
        created_at=rating.created_at,
        book_rating=recorded.book_rating,
    )


@router.post("/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(data: CommentCreateRequest, session: AsyncSession = Depends(get_session)):
    return await CommentService(session).add_comment(data.user_id, data.book_id, data.text)


@router.get("/comments/book/{book_id}", response_model=list[CommentResponse])
async def comments_for_book(book_id: int, session: AsyncSession = Depends(get_session)) -> list:
    return await CommentService(session).comments_for_book(book_id)
