"""Schema creation."""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Registers every model on Base.metadata
import kasboek.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from kasboek.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """Create missing tables and indexes; existing tables are left as they are."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema ready (%s)", engine.dialect.name)
