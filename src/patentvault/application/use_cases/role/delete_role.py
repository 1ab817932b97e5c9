"""Delete role use case."""

from loguru import logger

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.domain.entities import AuthorizationContext, normalize_role_name
from patentvault.domain.exceptions import NotFound, ProtectedRoleError, RoleInUseError
from patentvault.domain.value_objects import PermissionKey


class DeleteRoleUseCase:
    """Delete a custom role that no access rule references."""

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        name: str,
        environment: ClientEnvironment | None = None,
    ) -> None:
        require(context, PermissionKey.MANAGE_ACCESS)
        name = normalize_role_name(name)

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(name)
            if not role:
                raise NotFound("Role", name)
            if role.is_builtin:
                raise ProtectedRoleError(f"Built-in role {role.name} cannot be deleted")
            rules = await uow.access_rules.list_by_role(role.name)
            if rules:
                raise RoleInUseError(
                    f"Role {role.name} is referenced by {len(rules)} access rule(s)"
                )
            await uow.roles.delete(role.name)

        logger.info(f"{context.identity} deleted role {name}")
        await self._audit.log_action(
            context.identity, "DELETE_ROLE", target=name, environment=environment
        )
