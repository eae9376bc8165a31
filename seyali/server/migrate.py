"""
Database migration command: ``python -m seyali.server.migrate``.

Creates the application tables in the database named by ``DATABASE_URL``.
Exits with status 1 when the URL is missing or the migration fails.
"""

import asyncio
import sys
from typing import Optional

from seyali.core.logging_config import get_logger, setup_logging
from seyali.server.core.config import Settings
from seyali.server.core.database import create_engine, init_db

logger = get_logger(__name__)


async def run_migrations(settings: Settings) -> list[str]:
    engine = create_engine(settings.database_url or "")
    try:
        logger.info("Running database migrations...")
        return await init_db(engine)
    finally:
        await engine.dispose()


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or Settings()
    setup_logging(log_level=settings.log_level)
    try:
        asyncio.run(run_migrations(settings))
    except Exception as e:
        logger.error(f"Migration failed: {e}", exc_info=True)
        return 1
    logger.info("Migrations completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
