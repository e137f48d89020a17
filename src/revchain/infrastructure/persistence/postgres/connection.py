"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from revchain.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create async connection pool for the revision store.

    Pool is created with open=False. Caller must call await pool.open()
    before use (PoolLifespanMiddleware does this on ASGI startup).
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        open=False,
    )
