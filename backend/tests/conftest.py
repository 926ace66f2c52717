"""Shared fixtures: an in-memory article repository and an HTTP client wired to it."""

from collections.abc import AsyncIterator
from dataclasses import replace
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pressroom.application.interfaces import ArticleRepository
from pressroom.domain.entities import Article
from pressroom.domain.exceptions import EntityNotFoundError
from pressroom.infrastructure.dependencies import get_article_repository
from pressroom.main import create_app


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository; hands out copies so callers never alias stored rows."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self.writes: list[str] = []

    async def get_by_id(self, article_id: int) -> Article | None:
        article = self._articles.get(article_id)
        return replace(article) if article else None

    async def get_all(self) -> list[Article]:
        articles = sorted(
            self._articles.values(),
            key=lambda a: (a.created_at, a.id),
            reverse=True,
        )
        return [replace(a) for a in articles]

    async def create(self, article: Article) -> Article:
        now = datetime.now(timezone.utc)
        stored = replace(article, id=self._next_id, created_at=now, updated_at=now)
        self._next_id += 1
        self._articles[stored.id] = stored
        self.writes.append("create")
        return replace(stored)

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise EntityNotFoundError("Article", article.id)
        stored = replace(article, updated_at=datetime.now(timezone.utc))
        self._articles[article.id] = stored
        self.writes.append("update")
        return replace(stored)

    async def delete(self, article_id: int) -> bool:
        self.writes.append("delete")
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False

    def stored(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)


class BrokenArticleRepository(ArticleRepository):
    """Every call fails as if the database were unreachable."""

    async def get_by_id(self, article_id: int) -> Article | None:
        raise ConnectionError("database is unreachable")

    async def get_all(self) -> list[Article]:
        raise ConnectionError("database is unreachable")

    async def create(self, article: Article) -> Article:
        raise ConnectionError("database is unreachable")

    async def update(self, article: Article) -> Article:
        raise ConnectionError("database is unreachable")

    async def delete(self, article_id: int) -> bool:
        raise ConnectionError("database is unreachable")


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


def _client_for(repository: ArticleRepository) -> AsyncClient:
    app = create_app()
    app.dependency_overrides[get_article_repository] = lambda: repository
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def client(repository: FakeArticleRepository) -> AsyncIterator[AsyncClient]:
    async with _client_for(repository) as http:
        yield http


@pytest_asyncio.fixture
async def broken_client() -> AsyncIterator[AsyncClient]:
    async with _client_for(BrokenArticleRepository()) as http:
        yield http
