"""Access rule DTOs."""

from dataclasses import dataclass

from patentvault.domain.value_objects import RuleKind


@dataclass
class AccessRuleGroup:
    """All roles bound to one value, with the role login resolution uses."""

    value: str
    kind: RuleKind
    roles: list[str]
    effective_role: str
    description: str | None = None
