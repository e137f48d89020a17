"""Pool lifespan middleware - opens the revision store pool on startup, closes on shutdown."""

from typing import Any

from loguru import logger
from psycopg_pool import AsyncConnectionPool


class PoolLifespanMiddleware:
    """Ties the connection pool to the ASGI lifespan."""

    def __init__(self, pool: AsyncConnectionPool, open_timeout: float = 30.0) -> None:
        self._pool = pool
        self._open_timeout = open_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open(wait=True, timeout=self._open_timeout)
        logger.info("Connection pool opened", max_size=self._pool.max_size)

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Connection pool closed")
