"""Rename role use case - create, migrate rules, delete, with compensation."""

from dataclasses import replace

from loguru import logger

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.domain.entities import AuthorizationContext, Role, normalize_role_name
from patentvault.domain.exceptions import (
    DuplicateRoleError,
    NotFound,
    ProtectedRoleError,
    RenameMigrationFailure,
    ValidationError,
)
from patentvault.domain.value_objects import PermissionKey


class RenameRoleUseCase:
    """Rename a custom role and repoint every access rule at the new name.

    Steps run in one unit of work: create the new role, reassign rules,
    delete the old role. If a step after the first fails, completed steps
    are undone in reverse order before the transaction is rolled back, so
    exactly one of the two names stays resolvable.
    """

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        old_name: str,
        new_name: str,
        environment: ClientEnvironment | None = None,
    ) -> Role:
        require(context, PermissionKey.MANAGE_ACCESS)
        old_name = normalize_role_name(old_name)
        new_name = normalize_role_name(new_name)
        if not new_name:
            raise ValidationError("New role name is required")

        async with self._uow_factory() as uow:
            old = await uow.roles.get_by_name(old_name)
            if not old:
                raise NotFound("Role", old_name)
            if old.is_builtin:
                raise ProtectedRoleError(f"Built-in role {old.name} cannot be renamed")
            if await uow.roles.get_by_name(new_name):
                raise DuplicateRoleError(f"Role {new_name} already exists")

            new = replace(old, name=new_name)
            await uow.roles.create(new)
            migrated = False
            try:
                moved = await uow.access_rules.reassign_role(old.name, new.name)
                migrated = True
                await uow.roles.delete(old.name)
            except Exception as e:
                await self._compensate(uow, old.name, new.name, migrated)
                raise RenameMigrationFailure(
                    f"Rename {old.name} -> {new.name} failed and was rolled back: {e}"
                ) from e

        logger.info(f"{context.identity} renamed role {old.name} to {new.name} ({moved} rules)")
        await self._audit.log_action(
            context.identity,
            "RENAME_ROLE",
            target=new.name,
            details={"from": old.name, "rules_migrated": moved},
            environment=environment,
        )
        return new

    async def _compensate(self, uow, old_name: str, new_name: str, migrated: bool) -> None:
        try:
            if migrated:
                await uow.access_rules.reassign_role(new_name, old_name)
            await uow.roles.delete(new_name)
        except Exception as e:
            logger.error(f"Compensation for rename {old_name} -> {new_name} failed: {e}")
        await uow.rollback()
