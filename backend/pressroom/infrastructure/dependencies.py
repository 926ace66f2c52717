"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.application.interfaces import ArticleRepository
from pressroom.application.services import ArticleService
from pressroom.infrastructure.database.session import get_db_session
from pressroom.infrastructure.database.repositories import SQLAlchemyArticleRepository


async def get_article_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleRepository, None]:
    """Provides the SQLAlchemy-backed article repository bound to the request session."""
    yield SQLAlchemyArticleRepository(session)


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)
