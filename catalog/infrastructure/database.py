"""Database engine, session factory and the request-scoped session dependency.

Connection settings come from DATABASE_* environment variables (or .env).
One engine is built at import time and shared; every request gets its own
session wrapped in a single transaction.
"""

import logging
from collections.abc import AsyncGenerator

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DATABASE_", env_file=".env", extra="ignore")

    url: str = "postgresql+asyncpg://catalog:p@localhost/catalog"
    echo: bool = False
    pool_size: int = 5


def build_engine(settings: Settings) -> AsyncEngine:
    logger.debug("build_engine: pool_size=%d echo=%s", settings.pool_size, settings.echo)
    return create_async_engine(
        settings.url,
        echo=settings.echo,
        pool_size=settings.pool_size,
        pool_pre_ping=True,
    )


settings = Settings()
engine = build_engine(settings)

AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


class Base(DeclarativeBase):
    """Declarative base of the catalog_items mapping."""


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session whose transaction commits when the handler returns.

    An exception rolls the transaction back and propagates.  Two concurrent
    creates racing past the uniqueness check end here as an IntegrityError
    from the per-profile unique constraints.
    """
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session
