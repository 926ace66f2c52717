"""Article pages driven through the SQLAlchemy repository and session dependency."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from pressroom.infrastructure.database import ArticleModel, Base
from pressroom.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    get_db_session,
)
from pressroom.main import create_app


class FailingCommitSession(AsyncSession):
    async def commit(self) -> None:
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))


def _recording_session_class(events: list[str]) -> type[AsyncSession]:
    class RecordingSession(AsyncSession):
        async def commit(self) -> None:
            await super().commit()
            events.append("commit")

    return RecordingSession


def _recording_app(app, events: list[str]):
    """Wrap an ASGI app so the start of every response is noted in ``events``."""

    async def wrapped(scope, receive, send):
        async def recording_send(message):
            if message["type"] == "http.response.start":
                events.append(f"response {message['status']}")
            await send(message)

        await app(scope, receive, recording_send)

    return wrapped


def _client_for(engine: AsyncEngine, session_class=AsyncSession, events: list[str] | None = None) -> AsyncClient:
    factory = build_session_factory(engine, class_=session_class)

    async def in_memory_session() -> AsyncIterator[AsyncSession]:
        async with factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_db_session] = in_memory_session
    asgi_app = app if events is None else _recording_app(app, events)
    return AsyncClient(transport=ASGITransport(app=asgi_app), base_url="http://test")


async def _count_articles(engine: AsyncEngine) -> int:
    async with build_session_factory(engine)() as session:
        return await session.scalar(select(func.count()).select_from(ArticleModel))


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.mark.asyncio
async def test_create_show_edit_delete_round_trip(engine: AsyncEngine):
    async with _client_for(engine) as client:
        created = await client.post("/articles", data={"title": "A", "author": "B", "body": "C"})
        assert created.status_code == 303
        assert created.headers["location"].endswith("/articles/1")
        assert await _count_articles(engine) == 1

        shown = await client.get("/articles/1")
        assert shown.status_code == 200
        assert "<h2>A</h2>" in shown.text
        assert "By B on" in shown.text

        edited = await client.post("/articles/1/edit", data={"title": "A2", "author": "B", "body": "C2"})
        assert edited.status_code == 303
        assert "<h2>A2</h2>" in (await client.get("/articles/1")).text

        listing = await client.get("/articles")
        assert "A2" in listing.text

        deleted = await client.post("/articles/1/delete")
        assert deleted.status_code == 303
        assert deleted.headers["location"].endswith("/articles")

        gone = await client.get("/articles/1")
        assert gone.status_code == 404
        assert gone.content == b""

    assert await _count_articles(engine) == 0


@pytest.mark.asyncio
async def test_write_is_committed_before_redirect_is_sent(engine: AsyncEngine):
    events: list[str] = []
    async with _client_for(engine, _recording_session_class(events), events) as client:
        created = await client.post("/articles", data={"title": "Durable"})
        assert created.status_code == 303
        assert events == ["commit", "response 303"]

        events.clear()
        await client.post("/articles/1/edit", data={"title": "Still durable"})
        assert events == ["commit", "response 303"]

        events.clear()
        await client.post("/articles/1/delete")
        assert events == ["commit", "response 303"]


@pytest.mark.asyncio
async def test_failed_commit_on_create_renders_error_page(engine: AsyncEngine):
    async with _client_for(engine, FailingCommitSession) as client:
        response = await client.post("/articles", data={"title": "Lost"})

    assert response.status_code == 500
    assert "Something went wrong" in response.text
    assert "location" not in response.headers
    assert await _count_articles(engine) == 0


@pytest.mark.asyncio
async def test_failed_commit_on_update_keeps_stored_article(engine: AsyncEngine):
    async with _client_for(engine) as client:
        await client.post("/articles", data={"title": "Kept"})

    async with _client_for(engine, FailingCommitSession) as client:
        response = await client.post("/articles/1/edit", data={"title": "Changed"})
        assert response.status_code == 500
        assert "Something went wrong" in response.text

    async with _client_for(engine) as client:
        assert "<h2>Kept</h2>" in (await client.get("/articles/1")).text


@pytest.mark.asyncio
async def test_failed_commit_on_delete_keeps_article(engine: AsyncEngine):
    async with _client_for(engine) as client:
        await client.post("/articles", data={"title": "Survivor"})

    async with _client_for(engine, FailingCommitSession) as client:
        response = await client.post("/articles/1/delete")
        assert response.status_code == 500

    assert await _count_articles(engine) == 1
