"""Repository ports."""

from patentvault.application.ports.repositories.access_rule_repository import (
    AccessRuleRepository,
)
from patentvault.application.ports.repositories.action_log_repository import (
    ActionLogRepository,
)
from patentvault.application.ports.repositories.patent_repository import PatentRepository
from patentvault.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "AccessRuleRepository",
    "ActionLogRepository",
    "PatentRepository",
    "RoleRepository",
]
