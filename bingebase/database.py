"""SQLite engine management.

The store is a single file; the async engine (aiosqlite driver) is shared by
every request and safe for independent concurrent statements.
"""

import logging
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .models import Base

logger = logging.getLogger(__name__)


def create_engine_for_path(db_path: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine, making sure the database directory exists."""
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_async_engine(f"sqlite+aiosqlite:///{db_path}", echo=echo)


async def init_tables(engine: AsyncEngine) -> None:
    """Create every table that does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized", extra={"url": str(engine.url)})


async def ping(engine: AsyncEngine) -> bool:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    return True
