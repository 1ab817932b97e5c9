"""Access rule repository port."""

from typing import Protocol
from uuid import UUID

from patentvault.domain.entities import AccessRule
from patentvault.domain.value_objects import RuleKind


class AccessRuleRepository(Protocol):
    """Port for access rule persistence."""

    async def get_by_id(self, rule_id: UUID) -> AccessRule | None: ...

    async def list_all(self) -> list[AccessRule]:
        """All rules, newest first."""
        ...

    async def find(self, value: str, kind: RuleKind) -> list[AccessRule]:
        """Rules for value, oldest first."""
        ...

    async def list_by_role(self, role: str) -> list[AccessRule]: ...

    async def create(self, rule: AccessRule) -> bool:
        """Insert unless (value, kind, role) exists. Returns True if inserted."""
        ...

    async def delete(self, rule_id: UUID) -> None: ...

    async def delete_matching(self, value: str, kind: RuleKind, role: str | None = None) -> int: ...

    async def reassign_role(self, old_role: str, new_role: str) -> int: ...
