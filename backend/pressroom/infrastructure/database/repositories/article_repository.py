"""Concrete repository implementation backed by SQLAlchemy.

Every write commits before returning, so callers only see a result for
durable changes.
"""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.application.interfaces import ArticleRepository
from pressroom.domain.entities import Article
from pressroom.domain.exceptions import EntityNotFoundError
from pressroom.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            author=model.author,
            body=model.body,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation); id and timestamps are assigned by the database layer."""
        return ArticleModel(
            title=entity.title,
            author=entity.author,
            body=entity.body,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(
            ArticleModel.created_at.desc(), ArticleModel.id.desc()
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        return await self._commit(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id)
        model.title = article.title
        model.author = article.author
        model.body = article.body
        model.updated_at = datetime.now(timezone.utc)
        return await self._commit(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._commit()
        return True

    async def _commit(self, model: ArticleModel | None = None) -> Article | None:
        """Flush and commit the pending write, returning the written row as an entity.

        The entity is mapped between flush and commit, once the database has
        assigned the id. A failed commit is rolled back and re-raised.
        """
        try:
            await self._session.flush()
            entity = self._to_entity(model) if model is not None else None
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        return entity
