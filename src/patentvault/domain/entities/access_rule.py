"""Access rule entity - binds an email or domain to a role."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from patentvault.domain.value_objects import RuleKind


@dataclass
class AccessRule:
    """Access rule - value (email or bare domain) grants role."""

    id: UUID
    value: str
    kind: RuleKind
    role: str
    created_at: datetime
    description: str | None = None
