"""Role entity for RBAC."""

from dataclasses import dataclass, field
from datetime import datetime

ADMIN_ROLE = "ADMIN"
USER_ROLE = "USER"
BUILTIN_ROLES = frozenset({ADMIN_ROLE, USER_ROLE})


@dataclass
class Role:
    """Role - named set of permission keys."""

    name: str
    permissions: frozenset[str] = field(default_factory=frozenset)
    description: str | None = None
    created_at: datetime | None = None

    @property
    def is_builtin(self) -> bool:
        return self.name.upper() in BUILTIN_ROLES


def normalize_role_name(name: str) -> str:
    return name.strip().upper()
