"""
Database Connection and Schema Setup.

This module builds the asynchronous SQLAlchemy engine used by the migration
command and creates the tables declared in ``seyali.server.models``. The
Status Service itself never opens a database connection.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel

from seyali.core.logging_config import get_logger

# Register table models with SQLModel.metadata
from seyali.server import models  # noqa: F401

logger = get_logger(__name__)

_ASYNC_DRIVERS = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


def to_async_url(database_url: str) -> str:
    """
    Rewrite a plain connection string to use an async driver.

    URLs that already name a driver (``postgresql+asyncpg://``) are returned unchanged.
    """
    for prefix, replacement in _ASYNC_DRIVERS.items():
        if database_url.startswith(prefix):
            return replacement + database_url[len(prefix):]
    return database_url


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    if not database_url:
        raise ValueError("DATABASE_URL is not set")
    return create_async_engine(to_async_url(database_url), echo=echo)


async def init_db(engine: AsyncEngine) -> list[str]:
    """
    Initialize the database.

    Creates every table that does not exist yet and returns the table names
    known to the metadata.
    """
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    tables = sorted(SQLModel.metadata.tables)
    logger.info(f"Database tables ensured: {', '.join(tables)}")
    return tables
