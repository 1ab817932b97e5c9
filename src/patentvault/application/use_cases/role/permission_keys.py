"""Permission key validation at the administration boundary."""

from collections.abc import Iterable

from patentvault.domain.exceptions import ValidationError
from patentvault.domain.value_objects import PermissionKey


def validate_permission_keys(keys: Iterable[str]) -> frozenset[str]:
    """Reject keys outside PermissionKey; returns the deduplicated set."""
    keys = frozenset(k.strip() for k in keys)
    known = {k.value for k in PermissionKey}
    unknown = sorted(keys - known)
    if unknown:
        raise ValidationError(f"Unknown permission keys: {', '.join(unknown)}")
    return keys
