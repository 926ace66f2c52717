"""Application service (use case) for Article operations."""

import logging

from pressroom.application.interfaces import ArticleRepository
from pressroom.application.outcomes import (
    ArticleDeleted,
    ArticleFound,
    ArticleInvalid,
    ArticleNotFound,
    ArticleSaved,
    CreateOutcome,
    DeleteOutcome,
    FindOutcome,
    UpdateOutcome,
)
from pressroom.application.schemas import ArticleForm
from pressroom.domain.entities import Article

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit INTEGER primary key can hold.
_MAX_ARTICLE_ID = 2**63 - 1


def parse_article_id(raw_id: str | int) -> int | None:
    """Turn a path segment into a primary key; anything non-numeric is None."""
    if isinstance(raw_id, int):
        return raw_id
    if not raw_id.isascii() or not raw_id.isdigit():
        return None
    article_id = int(raw_id)
    if article_id > _MAX_ARTICLE_ID:
        return None
    return article_id


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Every method performs at most one write and never retries.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def find_article(self, raw_id: str | int) -> FindOutcome:
        article_id = parse_article_id(raw_id)
        if article_id is None:
            return ArticleNotFound(str(raw_id))
        article = await self._repository.get_by_id(article_id)
        if article is None:
            return ArticleNotFound(str(raw_id))
        return ArticleFound(article)

    async def create_article(self, form: ArticleForm) -> CreateOutcome:
        article = form.build()
        errors = article.validation_errors()
        if errors:
            logger.info("Rejected new article: %s", "; ".join(e.message for e in errors))
            return ArticleInvalid(article, errors)
        created = await self._repository.create(article)
        logger.info("Created article %s", created.id)
        return ArticleSaved(created)

    async def update_article(self, raw_id: str | int, form: ArticleForm) -> UpdateOutcome:
        found = await self.find_article(raw_id)
        if isinstance(found, ArticleNotFound):
            return found

        article = found.article
        attempted = form.build()
        attempted.id = article.id
        attempted.created_at = article.created_at
        attempted.updated_at = article.updated_at
        errors = attempted.validation_errors()
        if errors:
            logger.info(
                "Rejected update of article %s: %s",
                article.id,
                "; ".join(e.message for e in errors),
            )
            return ArticleInvalid(attempted, errors)

        article.update(title=form.title, author=form.author, body=form.body)
        updated = await self._repository.update(article)
        logger.info("Updated article %s", updated.id)
        return ArticleSaved(updated)

    async def delete_article(self, raw_id: str | int) -> DeleteOutcome:
        found = await self.find_article(raw_id)
        if isinstance(found, ArticleNotFound):
            return found
        article_id = found.article.id
        await self._repository.delete(article_id)
        logger.info("Deleted article %s", article_id)
        return ArticleDeleted(article_id)
