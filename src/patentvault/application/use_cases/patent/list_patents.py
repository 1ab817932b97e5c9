"""List patents use case."""

from patentvault.application.authorization import require
from patentvault.domain.entities import AuthorizationContext, Patent
from patentvault.domain.value_objects import PermissionKey


class ListPatentsUseCase:
    """List patent records, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, context: AuthorizationContext) -> list[Patent]:
        require(context, PermissionKey.VIEW_LIST)
        async with self._uow_factory() as uow:
            return await uow.patents.list_all()
