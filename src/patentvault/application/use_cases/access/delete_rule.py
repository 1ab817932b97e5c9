"""Delete access rule use case."""

from uuid import UUID

from loguru import logger

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.application.use_cases.access.rule_values import mirrored_values
from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.exceptions import NotFound
from patentvault.domain.services import IdentityNormalizer
from patentvault.domain.value_objects import PermissionKey


class DeleteAccessRuleUseCase:
    """Delete a rule together with its alias-domain mirror."""

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
        rule_id: UUID,
        environment: ClientEnvironment | None = None,
    ) -> int:
        """Delete rule and mirror. Returns number of rules removed."""
        require(context, PermissionKey.MANAGE_ACCESS)

        async with self._uow_factory() as uow:
            rule = await uow.access_rules.get_by_id(rule_id)
            if not rule:
                raise NotFound("AccessRule", str(rule_id))
            removed = 0
            for v in mirrored_values(self._normalizer, rule.value, rule.kind):
                removed += await uow.access_rules.delete_matching(v, rule.kind, rule.role)

        logger.info(f"{context.identity} revoked {rule.role} from {rule.kind} {rule.value}")
        await self._audit.log_action(
            context.identity,
            "DELETE_ACCESS_RULE",
            target=rule.value,
            details={"kind": str(rule.kind), "role": rule.role, "removed": removed},
            environment=environment,
        )
        return removed
