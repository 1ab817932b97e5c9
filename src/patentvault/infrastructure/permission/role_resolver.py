"""Role resolver - effective role of an email from access rules."""

from loguru import logger

from patentvault.domain.entities import USER_ROLE, AccessRule
from patentvault.domain.exceptions import LookupFailure
from patentvault.domain.services import IdentityNormalizer, effective_role
from patentvault.domain.value_objects import RuleKind


class RuleBasedRoleResolver:
    """Resolves role by rule precedence: EMAIL rule, then DOMAIN rule, then default.

    A failed lookup at one level counts as no match for that level, so a
    rule store outage degrades login to the default role instead of
    blocking it.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        normalizer: IdentityNormalizer,
        default_role: str = USER_ROLE,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._normalizer = normalizer
        self._default_role = default_role

    async def resolve(self, raw_email: str) -> str:
        """Return the effective role for raw_email."""
        canonical = self._normalizer.normalize(raw_email)
        email_rules = await self._rules(canonical, RuleKind.EMAIL)
        domain = self._normalizer.domain_of(canonical)
        domain_rules = await self._rules(domain, RuleKind.DOMAIN) if domain else []
        return effective_role(email_rules, domain_rules, self._default_role)

    async def _rules(self, value: str, kind: RuleKind) -> list[AccessRule]:
        try:
            return await self._find(value, kind)
        except LookupFailure as e:
            logger.warning(f"{e}; falling through")
            return []

    async def _find(self, value: str, kind: RuleKind) -> list[AccessRule]:
        try:
            async with self._uow_factory() as uow:
                return list(await uow.access_rules.find(value, kind))
        except Exception as e:
            raise LookupFailure(f"{kind} rule lookup failed for {value}: {e}") from e
