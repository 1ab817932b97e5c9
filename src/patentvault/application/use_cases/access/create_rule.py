"""Create access rule use case."""

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
from patentvault.domain.exceptions import NotFound, ValidationError
from patentvault.domain.services import IdentityNormalizer
from patentvault.domain.value_objects import PermissionKey, RuleKind


class CreateAccessRuleUseCase:
    """Grant a role to an email or domain, mirrored onto its alias domain."""

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
        role: str,
        description: str | None = None,
        environment: ClientEnvironment | None = None,
    ) -> list[AccessRule]:
        """Create rule and its mirror. Returns the rules written."""
        require(context, PermissionKey.MANAGE_ACCESS)
        value = normalize_rule_value(self._normalizer, value, kind)

        async with self._uow_factory() as uow:
            role_obj = await uow.roles.get_by_name(role)
            if not role_obj:
                raise NotFound("Role", role)

            now = datetime.now(UTC)
            created = []
            for v in mirrored_values(self._normalizer, value, kind):
                rule = AccessRule(
                    id=uuid4(),
                    value=v,
                    kind=kind,
                    role=role_obj.name,
                    description=description or None,
                    created_at=now,
                )
                if await uow.access_rules.create(rule):
                    created.append(rule)
            if not created:
                raise ValidationError(f"{kind} rule for {value} with role {role_obj.name} already exists")

        logger.info(f"{context.identity} granted {role_obj.name} to {kind} {value}")
        await self._audit.log_action(
            context.identity,
            "CREATE_ACCESS_RULE",
            target=value,
            details={"kind": str(kind), "role": role_obj.name, "mirrored": len(created) > 1},
            environment=environment,
        )
        return created
