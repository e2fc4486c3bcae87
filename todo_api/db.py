import asyncio
import logging
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from . import config
from .models import Base

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    """Pool settings for server databases; SQLite gets the driver defaults"""
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_timeout": 20,
        "pool_recycle": 300,  # 5 minutes
        "pool_pre_ping": True,  # Verify connections before use
    }


engine = create_async_engine(
    config.DATABASE_URL,
    echo=config.DB_ECHO,
    **_engine_options(config.DATABASE_URL)
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def init_db(max_retries: int = 3, retry_delay: float = 5) -> None:
    """Initialize the database by creating all tables"""
    for attempt in range(max_retries):
        try:
            logger.info("Database connection attempt %s/%s", attempt + 1, max_retries)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")
            return
        except Exception as e:
            logger.warning("Database connection attempt %s failed: %s", attempt + 1, e)
            if attempt < max_retries - 1:
                logger.info("Retrying in %s seconds...", retry_delay)
                await asyncio.sleep(retry_delay)
            else:
                logger.error("All database connection attempts failed")
                raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    async with AsyncSessionLocal() as session:
        yield session


async def close_db() -> None:
    """Close database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
