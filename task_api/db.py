import asyncio
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from .config import Settings, settings
from .errors import DatabaseUnavailableError
from .models import Base

logger = logging.getLogger(__name__)


def build_engine(config: Settings) -> AsyncEngine:
    """Create the async engine for the configured database"""
    options = {
        "echo": False,
        "pool_pre_ping": True,  # Verify connections before use
    }
    if config.is_sqlite:
        return create_async_engine(config.database_url, **options)

    if config.database_url.startswith("postgresql+asyncpg"):
        options["connect_args"] = {
            "server_settings": {
                "application_name": "task_api",
            }
        }

    return create_async_engine(
        config.database_url,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        pool_recycle=config.pool_recycle,
        **options,
    )


engine: Optional[AsyncEngine]
try:
    engine = build_engine(settings)
    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
except Exception:
    logger.exception("Error creating database engine")
    engine = None

# Create async session factory
if engine:
    AsyncSessionLocal = sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
else:
    AsyncSessionLocal = None


async def init_db():
    """Initialize the database by creating the tasks table"""
    if not engine:
        logger.warning("Skipping database initialization - no engine available")
        return

    max_retries = settings.connect_retries
    retry_delay = settings.connect_retry_delay

    for attempt in range(max_retries):
        try:
            logger.info("Database connection attempt %d/%d", attempt + 1, max_retries)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")
            return
        except Exception as e:
            logger.warning("Database connection attempt %d failed: %s", attempt + 1, e)
            if attempt < max_retries - 1:
                logger.info("Retrying in %d seconds...", retry_delay)
                await asyncio.sleep(retry_delay)
            else:
                logger.error("All database connection attempts failed")
                raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    if not AsyncSessionLocal:
        raise DatabaseUnavailableError("Database not available")

    async with AsyncSessionLocal() as session:
        yield session


async def close_db():
    """Close database connections"""
    if engine:
        await engine.dispose()
        logger.info("Database connections closed")
