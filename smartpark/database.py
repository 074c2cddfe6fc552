"""
Database engine, session factory and declarative base.
"""
from typing import AsyncGenerator, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from smartpark.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base for all SmartPark tables."""


_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def init_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """Create the engine and session factory if they do not exist yet."""
    global _engine, _async_session_factory

    if _engine is None:
        settings = settings or get_settings()
        _engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
        )
        _async_session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _engine


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides a database session.

    The session is closed when the request finishes; services commit
    their own statements.
    """
    if _async_session_factory is None:
        init_engine()

    async with _async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(settings: Optional[Settings] = None) -> None:
    """Create all tables."""
    # Register models on Base.metadata
    import smartpark.models  # noqa: F401

    engine = init_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


async def dispose_engine() -> None:
    """Close all pooled connections."""
    global _engine, _async_session_factory

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _async_session_factory = None
