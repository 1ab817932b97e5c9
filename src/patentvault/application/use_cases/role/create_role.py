"""Create role use case."""

from collections.abc import Iterable
from datetime import UTC, datetime

from loguru import logger

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.application.use_cases.role.permission_keys import validate_permission_keys
from patentvault.domain.entities import AuthorizationContext, Role, normalize_role_name
from patentvault.domain.exceptions import DuplicateRoleError, ValidationError
from patentvault.domain.value_objects import PermissionKey


class CreateRoleUseCase:
    """Create a custom role with an initial permission set."""

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        name: str,
        permissions: Iterable[str] = (),
        description: str | None = None,
        environment: ClientEnvironment | None = None,
    ) -> Role:
        require(context, PermissionKey.MANAGE_ACCESS)
        name = normalize_role_name(name)
        if not name:
            raise ValidationError("Role name is required")
        keys = validate_permission_keys(permissions)

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name):
                raise DuplicateRoleError(f"Role {name} already exists")
            role = Role(
                name=name,
                permissions=keys,
                description=description or None,
                created_at=datetime.now(UTC),
            )
            await uow.roles.create(role)

        logger.info(f"{context.identity} created role {name}")
        await self._audit.log_action(
            context.identity,
            "CREATE_ROLE",
            target=name,
            details={"permissions": sorted(keys)},
            environment=environment,
        )
        return role
