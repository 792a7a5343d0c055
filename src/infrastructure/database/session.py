"""Database session management."""

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings

_engine_kwargs: dict[str, Any] = {"echo": settings.debug}
if settings.async_database_url.startswith("postgresql"):
    _engine_kwargs["pool_pre_ping"] = True

# Create async engine
engine = create_async_engine(settings.async_database_url, **_engine_kwargs)

# Create async session factory
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
