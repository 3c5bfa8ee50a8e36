from __future__ import annotations

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from eli.shared.db.database import get_db_session
from eli.shared.db.models import Base, Building, Floor
from eli.web import live
from eli.web.auth.jwt import create_session_token
from eli.web.config import config
from eli.web.main import app


class FakePublisher:
    """Records live messages instead of sending them to Redis."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, dict]] = []

    async def publish(self, message_type: str, payload: dict) -> int:
        self.messages.append((message_type, payload))
        return 1

    def of_type(self, message_type: str) -> list[dict]:
        return [payload for kind, payload in self.messages if kind == message_type]


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def insert(session_factory):
    """Commit rows in their own session and hand them back with ids set."""

    async def _insert(*rows):
        async with session_factory() as session:
            session.add_all(rows)
            await session.commit()
        return rows

    return _insert


@pytest.fixture
async def floor(insert) -> Floor:
    (building,) = await insert(Building(name="Sciences Library", code="SCILI", floors_count=2))
    (floor,) = await insert(Floor(building_id=building.id, level=1, name="Sciences Library - Floor 1"))
    return floor


@pytest.fixture
def live_messages(monkeypatch) -> FakePublisher:
    publisher = FakePublisher()

    async def fake_get_live_publisher():
        return publisher

    monkeypatch.setattr(config, "LIVE_EVENTS_ENABLED", True)
    monkeypatch.setattr(live, "get_live_publisher", fake_get_live_publisher)
    return publisher


def session_override(session_factory):
    """Stand-in for get_db_session bound to a test session factory."""

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return override_get_db_session


@pytest.fixture
async def client(session_factory, live_messages) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_db_session] = session_override(session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def file_session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Sessions on a SQLite file, so each one gets its own connection."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'eli.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def file_client(file_session_factory, monkeypatch) -> AsyncGenerator[AsyncClient, None]:
    monkeypatch.setattr(config, "LIVE_EVENTS_ENABLED", True)
    app.dependency_overrides[get_db_session] = session_override(file_session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


def session_cookie(role: str = "admin") -> dict:
    token = create_session_token(config.DEMO_USERNAME, role, config.DEMO_DISPLAY_NAME)
    return {config.COOKIE_NAME: token}


@pytest.fixture
def admin_client(client) -> AsyncClient:
    client.cookies.update(session_cookie("admin"))
    return client


@pytest.fixture
def user_client(client) -> AsyncClient:
    """Signed in, but without the admin role."""
    client.cookies.update(session_cookie("user"))
    return client
