"""FastAPI application factory — entry point for Bookshelf."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.routes.authors import router as authors_router
from app.api.routes.books import router as books_router
from app.api.routes.collections import router as collections_router
from app.api.routes.reviews import router as reviews_router
from app.api.routes.users import router as users_router
from app.config import settings
from app.database import engine, unit_of_work
from app.seed import seed_catalog

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    logger.info("Bookshelf starting up...")
    logger.info("Database dialect: %s", engine.dialect.name)
    logger.info("Discount policy: %s", settings.discount_policy.value)
    logger.info("Top sellers limit: %d", settings.top_sellers_limit)
    if settings.seed_sample_data:
        async with unit_of_work() as session:
            await seed_catalog(session)
    yield
    await engine.dispose()
    logger.info("Bookshelf shutting down...")


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title="Bookshelf",
        description="Bookstore catalog: books, authors, ratings, carts and wishlists",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── Error mapping ──────────────────────────────
    register_exception_handlers(application)

    # ── Routes ─────────────────────────────────────
    application.include_router(books_router)
    application.include_router(authors_router)
    application.include_router(reviews_router)
    application.include_router(users_router)
    application.include_router(collections_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": "bookshelf"}

    return application


app = create_app()
