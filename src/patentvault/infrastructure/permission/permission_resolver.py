"""Permission resolver - permission keys granted to a role."""

from loguru import logger

from patentvault.domain.entities import Role
from patentvault.domain.exceptions import LookupFailure


class RolePermissionResolver:
    """Looks up a role's permission set; empty set when missing or unreachable."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve(self, role_name: str) -> frozenset[str]:
        """Return permission keys for role_name."""
        try:
            role = await self._get(role_name)
        except LookupFailure as e:
            logger.warning(f"{e}; granting nothing")
            return frozenset()
        if role is None:
            logger.warning(f"Role {role_name} not found; granting nothing")
            return frozenset()
        return frozenset(role.permissions)

    async def _get(self, role_name: str) -> Role | None:
        try:
            async with self._uow_factory() as uow:
                return await uow.roles.get_by_name(role_name)
        except Exception as e:
            raise LookupFailure(f"Role lookup failed for {role_name}: {e}") from e
