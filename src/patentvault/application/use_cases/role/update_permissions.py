"""Update role permissions use case - full replacement."""

from collections.abc import Iterable

from loguru import logger

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.application.use_cases.role.permission_keys import validate_permission_keys
from patentvault.domain.entities import AuthorizationContext, Role, normalize_role_name
from patentvault.domain.exceptions import NotFound
from patentvault.domain.value_objects import PermissionKey


class UpdateRolePermissionsUseCase:
    """Replace the permission set of a role."""

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        name: str,
        permissions: Iterable[str],
        environment: ClientEnvironment | None = None,
    ) -> Role:
        require(context, PermissionKey.MANAGE_ACCESS)
        keys = validate_permission_keys(permissions)

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(normalize_role_name(name))
            if not role:
                raise NotFound("Role", name)
            previous = role.permissions
            await uow.roles.set_permissions(role.name, keys)
            role.permissions = keys

        logger.info(f"{context.identity} updated permissions of {role.name}")
        await self._audit.log_action(
            context.identity,
            "UPDATE_ROLE",
            target=role.name,
            details={
                "added": sorted(keys - previous),
                "removed": sorted(previous - keys),
            },
            environment=environment,
        )
        return role
