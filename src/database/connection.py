"""
Database connection and pool management
"""

import asyncpg
import logging
from fastapi import Request

from config.settings import Settings

logger = logging.getLogger(__name__)


async def init_database(settings: Settings) -> asyncpg.Pool:
    """Create the connection pool and verify the database is reachable"""
    db_pool = await asyncpg.create_pool(
        settings.postgres_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
        statement_cache_size=0  # Fix for pgbouncer compatibility
    )

    # Test connection
    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except Exception:
        await db_pool.close()
        raise

    logger.info("Database initialized successfully")
    return db_pool


async def close_database(db_pool: asyncpg.Pool):
    """Close database connection pool"""
    if db_pool:
        await db_pool.close()
    logger.info("Database connections closed")


def get_db_pool(request: Request) -> asyncpg.Pool:
    """FastAPI dependency returning the pool created by the application lifespan"""
    db_pool = getattr(request.app.state, "db_pool", None)
    if db_pool is None:
        raise RuntimeError("Database pool not initialized")
    return db_pool
