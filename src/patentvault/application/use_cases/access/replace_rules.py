"""Replace access rules use case - delete then reinsert the rule set of a value."""

from datetime import UTC, datetime
from uuid import uuid4

from loguru import logger

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.application.use_cases.access.rule_values import (
    mirrored_values,
    normalize_rule_value,
)
from patentvault.domain.entities import AccessRule, AuthorizationContext
from patentvault.domain.exceptions import NotFound
from patentvault.domain.services import IdentityNormalizer
from patentvault.domain.value_objects import PermissionKey, RuleKind


class ReplaceAccessRulesUseCase:
    """Set the exact roles held by an email or domain. Empty roles revokes all."""

    def __init__(
        self,
        unit_of_work_factory: type,
        normalizer: IdentityNormalizer,
        audit_logger: AuditLogger,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._normalizer = normalizer
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        value: str,
        kind: RuleKind,
        roles: list[str],
        description: str | None = None,
        environment: ClientEnvironment | None = None,
    ) -> list[AccessRule]:
        """Replace rules for value (and mirror). Returns the rules written."""
        require(context, PermissionKey.MANAGE_ACCESS)
        value = normalize_rule_value(self._normalizer, value, kind)
        values = mirrored_values(self._normalizer, value, kind)

        async with self._uow_factory() as uow:
            role_names = []
            for name in roles:
                role_obj = await uow.roles.get_by_name(name)
                if not role_obj:
                    raise NotFound("Role", name)
                if role_obj.name not in role_names:
                    role_names.append(role_obj.name)

            for v in values:
                await uow.access_rules.delete_matching(v, kind)

            now = datetime.now(UTC)
            written = []
            for role_name in role_names:
                for v in values:
                    rule = AccessRule(
                        id=uuid4(),
                        value=v,
                        kind=kind,
                        role=role_name,
                        description=description or None,
                        created_at=now,
                    )
                    await uow.access_rules.create(rule)
                    written.append(rule)

        logger.info(f"{context.identity} set {kind} {value} roles to {role_names}")
        await self._audit.log_action(
            context.identity,
            "REPLACE_ACCESS_RULES",
            target=value,
            details={"kind": str(kind), "roles": role_names},
            environment=environment,
        )
        return written
