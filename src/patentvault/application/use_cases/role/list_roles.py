"""List roles use case."""

from patentvault.application.authorization import require
from patentvault.domain.entities import AuthorizationContext, Role
from patentvault.domain.value_objects import PermissionKey


class ListRolesUseCase:
    """Roles with built-ins first, then by name."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, context: AuthorizationContext) -> list[Role]:
        require(context, PermissionKey.MANAGE_ACCESS)
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        return sorted(roles, key=lambda r: (not r.is_builtin, r.name))
