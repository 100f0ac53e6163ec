"""Author routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas import AuthorCreateRequest, AuthorResponse, BookResponse, DedupResponse
from app.database import get_session
from app.services.authors import AuthorService
from app.services.books import BookService

router = APIRouter(prefix="/authors", tags=["Authors"])


@router.get("", response_model=list[AuthorResponse])
async def list_authors(session: AsyncSession = Depends(get_session)) -> list:
    return await AuthorService(session).list_authors()


@router.post("", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED)
async def register_author(data: AuthorCreateRequest, session: AsyncSession = Depends(get_session)):
    return await AuthorService(session).register_author(data)


@router.post("/batch", response_model=list[AuthorResponse], status_code=status.HTTP_201_CREATED)
async def register_authors(
    items: list[AuthorCreateRequest], session: AsyncSession = Depends(get_session)
) -> list:
    return await AuthorService(session).register_authors(items)


@router.delete("/duplicates", response_model=DedupResponse)
async def remove_duplicate_authors(session: AsyncSession = Depends(get_session)) -> DedupResponse:
    """Delete repeated authors; their books are deleted along with them."""
    result = await AuthorService(session).remove_duplicate_authors()
    return DedupResponse(kept=len(result.survivors), removed=[a.id for a in result.removed])


@router.get("/{author_id}/books", response_model=list[BookResponse])
async def books_by_author(author_id: int, session: AsyncSession = Depends(get_session)) -> list:
    return await BookService(session).books_by_author(author_id)
