"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from patentvault.infrastructure.persistence.postgres.access_rule_repository import (
    PostgresAccessRuleRepository,
)
from patentvault.infrastructure.persistence.postgres.action_log_repository import (
    PostgresActionLogRepository,
)
from patentvault.infrastructure.persistence.postgres.patent_repository import (
    PostgresPatentRepository,
)
from patentvault.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._access_rules = PostgresAccessRuleRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._action_logs = PostgresActionLogRepository(self._conn)
        self._patents = PostgresPatentRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def access_rules(self) -> PostgresAccessRuleRepository:
        return self._access_rules

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def action_logs(self) -> PostgresActionLogRepository:
        return self._action_logs

    @property
    def patents(self) -> PostgresPatentRepository:
        return self._patents

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
