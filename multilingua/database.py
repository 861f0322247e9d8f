from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from multilingua.config import settings
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str | None = None):
    """Create the async engine for the configured environment."""
    url = database_url or settings.database_url

    if settings.environment == "production" and not url.startswith("sqlite"):
        return create_async_engine(
            url,
            pool_size=20,
            max_overflow=50,
            pool_timeout=60,
            pool_recycle=1800,
        )
    return create_async_engine(url, echo=settings.debug)


def build_session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def create_tables(engine) -> None:
    import multilingua.models  # noqa: F401

    logger.info("Creating catalog tables (if not existing)...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
