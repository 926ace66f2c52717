"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, status
from fastapi.responses import RedirectResponse
from sqlalchemy import func, select

from pressroom.config import get_settings
from pressroom.infrastructure.database import ArticleModel, Base, engine
from pressroom.infrastructure.database.session import async_session_factory
from pressroom.infrastructure.logging.log_config import setup_logging
from pressroom.presentation.web.router import router as web_router

logger = logging.getLogger(__name__)

SAMPLE_ARTICLES = (
    {
        "title": "Welcome to Pressroom",
        "author": "The Editors",
        "body": "Pressroom keeps short articles in one place. Use the New Article "
                "link to write one, then edit or delete it from its page.",
    },
    {
        "title": "Writing a good title",
        "author": "The Editors",
        "body": "Every article needs a title. Author and body are optional, but a "
                "body longer than two hundred characters is shortened on the listing.",
    },
    {
        "title": "Housekeeping",
        "author": None,
        "body": "Deleted articles are gone for good, so double-check before confirming.",
    },
)


async def _seed_sample_articles() -> None:
    """Insert the sample articles when the table is empty.

    Idempotent — a non-empty table is left untouched.
    """
    async with async_session_factory() as session:
        existing = await session.scalar(select(func.count()).select_from(ArticleModel))
        if existing:
            logger.debug("Articles table already has %d rows; skipping seed", existing)
            return
        session.add_all(ArticleModel(**data) for data in SAMPLE_ARTICLES)
        await session.commit()
        logger.info("Seeded %d sample articles", len(SAMPLE_ARTICLES))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed data."""
    settings = get_settings()
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_sample_articles:
        await _seed_sample_articles()

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    @app.get("/", include_in_schema=False)
    async def index() -> RedirectResponse:
        return RedirectResponse(app.url_path_for("list_articles"), status_code=status.HTTP_302_FOUND)

    app.include_router(web_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pressroom.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
