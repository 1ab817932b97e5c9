"""Pool lifespan middleware - opens pool on startup, closes on shutdown."""

from typing import Any

from loguru import logger
from psycopg_pool import AsyncConnectionPool

from patentvault.infrastructure.audit.action_logger import ActionLogger


class PoolLifespanMiddleware:
    """Opens the connection pool when the ASGI server starts.

    The pool is opened without waiting for connections, so the service
    starts while the database is down; logins then fall back to the
    default role until it is reachable. On shutdown, background audit
    writes are drained before the pool closes.
    """

    def __init__(
        self, pool: AsyncConnectionPool, action_logger: ActionLogger | None = None
    ) -> None:
        self._pool = pool
        self._action_logger = action_logger

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.open(wait=False)
        logger.info("Database pool opened")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        if self._action_logger is not None:
            await self._action_logger.drain()
        await self._pool.close()
        logger.info("Database pool closed")
