"""asyncpg connection helpers for crowdsrc."""

import logging

import asyncpg

from ..config.settings import DatabaseSettings
from ..core.exceptions import ConnectionPoolError

logger = logging.getLogger(__name__)


async def create_connection_pool(settings: DatabaseSettings) -> asyncpg.Pool:
    """Create the asyncpg connection pool used by the storage adapter.
    
    Args:
        settings: Database settings
        
    Returns:
        Ready connection pool
        
    Raises:
        ConnectionPoolError: If the pool cannot be created
    """
    try:
        pool = await asyncpg.create_pool(
            host=settings.host,
            port=settings.port,
            database=settings.database_name,
            user=settings.username,
            password=settings.password.get_secret_value(),
            ssl=settings.ssl_mode,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            timeout=settings.pool_timeout_seconds,
            command_timeout=settings.command_timeout_seconds,
        )
    except Exception as e:
        logger.error(f"Failed to create pool for {settings.safe_dsn}: {e}")
        raise ConnectionPoolError(
            f"Failed to create connection pool: {e}",
            details={"dsn": settings.safe_dsn},
        ) from e
    
    logger.info(
        f"Created connection pool for {settings.safe_dsn}: "
        f"min={settings.pool_min_size}, max={settings.pool_max_size}"
    )
    return pool


async def open_connection(settings: DatabaseSettings) -> asyncpg.Connection:
    """Open a single, unpooled connection (migrations, database creation)."""
    try:
        return await asyncpg.connect(
            dsn=settings.dsn,
            timeout=settings.pool_timeout_seconds,
            command_timeout=settings.command_timeout_seconds,
        )
    except Exception as e:
        logger.error(f"Failed to connect to {settings.safe_dsn}: {e}")
        raise ConnectionPoolError(
            f"Failed to connect to database: {e}",
            details={"dsn": settings.safe_dsn},
        ) from e
