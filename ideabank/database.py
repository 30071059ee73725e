from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool
from ideabank.config import (
    DATABASE_URL,
    DB_POOL_SIZE,
    DB_MAX_OVERFLOW,
    DB_POOL_TIMEOUT,
    DB_ECHO,
)
from typing import AsyncGenerator


def _build_engine(url: str):
    if not url:
        raise RuntimeError("DATABASE_URL is not configured in the backend environment")

    if url.startswith("sqlite"):
        # aiosqlite connections are cheap and must not outlive their event loop
        return create_async_engine(url, echo=DB_ECHO, future=True, poolclass=NullPool)

    # Bounded pool: callers past pool_size + max_overflow wait up to pool_timeout
    return create_async_engine(
        url.replace("postgresql://", "postgresql+asyncpg://"),
        echo=DB_ECHO,
        future=True,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_timeout=DB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


engine = _build_engine(DATABASE_URL)

AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()

# Dependency for FastAPI routes
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
