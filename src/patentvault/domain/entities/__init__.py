"""Domain entities."""

from patentvault.domain.entities.access_rule import AccessRule
from patentvault.domain.entities.action_log import ActionLogEntry
from patentvault.domain.entities.authorization_context import AuthorizationContext
from patentvault.domain.entities.patent import Patent
from patentvault.domain.entities.role import (
    ADMIN_ROLE,
    BUILTIN_ROLES,
    USER_ROLE,
    Role,
    normalize_role_name,
)

__all__ = [
    "ADMIN_ROLE",
    "BUILTIN_ROLES",
    "USER_ROLE",
    "AccessRule",
    "ActionLogEntry",
    "AuthorizationContext",
    "Patent",
    "Role",
    "normalize_role_name",
]
