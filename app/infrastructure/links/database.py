"""
Async database engine and schema setup for link bundles.

Uses SQLAlchemy's asyncio extension. The engine is created once per
application (see app.main lifespan) and shared by every request.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.core.config import Settings

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS link_bundles (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL DEFAULT '',
        vanity_url TEXT NOT NULL UNIQUE,
        description TEXT NOT NULL DEFAULT '',
        links TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS ix_link_bundles_user_id ON link_bundles (user_id)",
)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build an async engine from application settings."""
    engine_kwargs: dict[str, object] = {"echo": settings.database_echo}
    if not settings.database_url.startswith("sqlite"):
        engine_kwargs["pool_pre_ping"] = True
    return create_async_engine(settings.database_url, **engine_kwargs)


async def init_schema(engine: AsyncEngine) -> None:
    """Create the link bundle table and indexes if they do not exist."""
    async with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(text(statement))
    logger.info("Link bundle schema ready")
