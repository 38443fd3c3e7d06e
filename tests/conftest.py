"""Shared fixtures: default plan, async SQLite sessions, API client."""
import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from app.db.session import get_session, init_models
from app.main import app
from app.schemas.config import BusinessConfig


@pytest.fixture
def config() -> BusinessConfig:
    return BusinessConfig()


@pytest_asyncio.fixture
async def db():
    """In-memory SQLite session, fresh schema per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(engine)
    Session = async_sessionmaker(engine, expire_on_commit=False)
    async with Session() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def client(tmp_path):
    """TestClient with the session dependency pointed at a temp database."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )
    asyncio.run(init_models(engine))
    Session = async_sessionmaker(engine, expire_on_commit=False)

    async def _override_session():
        async with Session() as session:
            yield session

    app.dependency_overrides[get_session] = _override_session
    yield TestClient(app)
    app.dependency_overrides.clear()
