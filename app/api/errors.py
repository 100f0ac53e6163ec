"""Map catalog errors onto HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.domain.errors import (
    AlreadyMember,
    CatalogError,
    ConcurrentUpdate,
    DuplicateIsbn,
    DuplicateWishlistName,
    InvalidDiscount,
    InvalidScore,
    IsbnValidationError,
    NoMatchingRecords,
    NotFound,
    NotMember,
    UsernameTaken,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[CatalogError], int] = {
    IsbnValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidDiscount: status.HTTP_400_BAD_REQUEST,
    InvalidScore: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    NoMatchingRecords: status.HTTP_404_NOT_FOUND,
    NotMember: status.HTTP_404_NOT_FOUND,
    DuplicateIsbn: status.HTTP_409_CONFLICT,
    AlreadyMember: status.HTTP_409_CONFLICT,
    UsernameTaken: status.HTTP_409_CONFLICT,
    DuplicateWishlistName: status.HTTP_409_CONFLICT,
    ConcurrentUpdate: status.HTTP_409_CONFLICT,
}


def status_for(exc: CatalogError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    code = status_for(exc)
    logger.info("%s %s -> %d (%s)", request.method, request.url.path, code, type(exc).__name__)
    return JSONResponse(
        status_code=code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
