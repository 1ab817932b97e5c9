"""Domain value objects."""

from patentvault.domain.value_objects.permission_key import PermissionKey
from patentvault.domain.value_objects.rule_kind import RuleKind

__all__ = [
    "PermissionKey",
    "RuleKind",
]
