"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from patentvault.application.ports.repositories.access_rule_repository import (
    AccessRuleRepository,
)
from patentvault.application.ports.repositories.action_log_repository import (
    ActionLogRepository,
)
from patentvault.application.ports.repositories.patent_repository import PatentRepository
from patentvault.application.ports.repositories.role_repository import RoleRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def access_rules(self) -> AccessRuleRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def action_logs(self) -> ActionLogRepository: ...

    @property
    def patents(self) -> PatentRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
