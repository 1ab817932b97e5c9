"""Dashboard summary use case."""

from patentvault.application.authorization import require
from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.value_objects import PermissionKey


class DashboardSummaryUseCase:
    """Patent counts by status for the dashboard."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, context: AuthorizationContext) -> dict[str, int]:
        require(context, PermissionKey.VIEW_DASHBOARD)
        async with self._uow_factory() as uow:
            counts = await uow.patents.count_by_status()
        return {"total": sum(counts.values()), **counts}
