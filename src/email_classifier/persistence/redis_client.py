"""
Async Redis client with connection pooling for the persistence layer.
"""

import logging
from typing import Optional

from redis.asyncio import ConnectionPool as AsyncConnectionPool
from redis.asyncio import Redis as AsyncRedis

from email_classifier.config import Settings

logger = logging.getLogger(__name__)


class RedisClient:
    """
    Holder for the process-wide async connection pool.
    """
    
    _async_pool: Optional[AsyncConnectionPool] = None
    
    @classmethod
    def get_async_client(cls, settings: Settings) -> AsyncRedis:
        """
        Get an async Redis client backed by the shared pool.
        
        Args:
            settings: Application settings
        
        Returns:
            AsyncRedis client instance
        """
        if cls._async_pool is None:
            cls._async_pool = AsyncConnectionPool.from_url(
                settings.REDIS_URL,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                decode_responses=True,  # Auto-decode bytes to str
                socket_timeout=5,
                socket_connect_timeout=5,
                retry_on_timeout=True,
            )
            logger.info("Initialized Redis async connection pool")
        
        return AsyncRedis(connection_pool=cls._async_pool)
    
    @classmethod
    async def close_async_pool(cls):
        """Close async connection pool (cleanup on shutdown)."""
        if cls._async_pool is not None:
            await cls._async_pool.disconnect()
            cls._async_pool = None
            logger.info("Closed Redis async connection pool")
