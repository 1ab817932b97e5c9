"""List access rules use case."""

from patentvault.application.authorization import require
from patentvault.application.dto.access_rule_dto import AccessRuleGroup
from patentvault.domain.entities import AccessRule, AuthorizationContext
from patentvault.domain.services import first_match
from patentvault.domain.value_objects import PermissionKey


class ListAccessRulesUseCase:
    """List rules flat (newest first) or grouped by value."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, context: AuthorizationContext) -> list[AccessRule]:
        require(context, PermissionKey.MANAGE_ACCESS)
        async with self._uow_factory() as uow:
            return await uow.access_rules.list_all()

    async def grouped(self, context: AuthorizationContext) -> list[AccessRuleGroup]:
        """One group per (value, kind).

        effective_role is chosen with the same tie-break login uses, so the
        admin view shows what a session for that value would get.
        """
        rules = await self.execute(context)
        buckets: dict[tuple[str, str], list[AccessRule]] = {}
        for rule in rules:
            buckets.setdefault((rule.value, rule.kind), []).append(rule)

        groups = []
        for (value, kind), bucket in buckets.items():
            winner = first_match(bucket)
            ordered = sorted(bucket, key=lambda r: (r.created_at, r.role))
            groups.append(
                AccessRuleGroup(
                    value=value,
                    kind=kind,
                    roles=[r.role for r in ordered],
                    effective_role=winner.role,
                    description=next((r.description for r in ordered if r.description), None),
                )
            )
        return groups
