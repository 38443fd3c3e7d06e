# app/db/session.py
# -----------------------------------------------------------------------------
# 시나리오 저장소용 Async 엔진/세션
# - 기본 SQLite(aiosqlite), DATABASE_URL 만 바꾸면 다른 DB로 교체
# - init_models: 기동 시(또는 테스트 엔진에) 테이블 생성
# -----------------------------------------------------------------------------
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from app.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, echo=False)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)
Base = declarative_base()


async def init_models(target: AsyncEngine = engine) -> None:
    from app.db import models  # noqa: F401  (테이블 메타데이터 등록)

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
