# app/core/database.py
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from .config import settings
import logging
from typing import AsyncGenerator

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **overrides) -> AsyncEngine:
    """Create an async engine configured for the given database URL."""
    if database_url.startswith("sqlite"):
        engine_kwargs = {"echo": settings.DEBUG, "future": True}
    else:
        engine_kwargs = {
            "echo": settings.DEBUG,
            "future": True,
            "pool_size": 5,
            "max_overflow": 5,
            "pool_timeout": 30,       # Seconds to wait for a free connection
            "pool_pre_ping": True,    # Check connection before using
            "pool_recycle": 300,      # Recycle connections after 5 minutes
        }
    engine_kwargs.update(overrides)

    new_engine = create_async_engine(database_url, **engine_kwargs)
    if database_url.startswith("sqlite"):
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        logger.info("🔧 Configured SQLite engine (foreign keys enforced)")
    return new_engine


engine = build_engine(settings.DATABASE_URL)

# AsyncSession factory using async_sessionmaker
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
)

# Base class for all models
Base = declarative_base()

# Dependency to get DB session with proper exception handling
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    session = AsyncSessionLocal()
    try:
        yield session
    except Exception as e:
        logger.error(f"Database session error: {str(e)}")
        await session.rollback()
        raise
    finally:
        await session.close()
        logger.debug("Database session closed")
