"""List action logs use case."""

from patentvault.application.authorization import require
from patentvault.domain.entities import ActionLogEntry, AuthorizationContext
from patentvault.domain.value_objects import PermissionKey


class ListActionLogsUseCase:
    """Most recent audit entries, optionally filtered."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        context: AuthorizationContext,
        limit: int = 100,
        actor: str | None = None,
        action: str | None = None,
    ) -> list[ActionLogEntry]:
        require(context, PermissionKey.VIEW_LOGS)
        limit = min(max(limit, 1), 500)
        async with self._uow_factory() as uow:
            return await uow.action_logs.list_recent(limit=limit, actor=actor, action=action)
