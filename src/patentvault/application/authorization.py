"""Authorization gate - the single decision point for permission checks."""

from collections.abc import Iterable
from typing import TypeVar

from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.exceptions import PermissionDenied

T = TypeVar("T")


def authorize(granted: Iterable[str], required: str) -> bool:
    """True if required is among the granted permission keys."""
    return required in frozenset(granted)


def require(context: AuthorizationContext, required: str) -> None:
    """Raise PermissionDenied unless the session holds required."""
    if not authorize(context.granted_permissions, required):
        raise PermissionDenied(
            f"Role {context.effective_role} lacks permission '{required}'"
        )


def guard(
    context: AuthorizationContext,
    required: str,
    item: T,
    fallback: T | None = None,
) -> T | None:
    """Return item when authorized, otherwise fallback."""
    if authorize(context.granted_permissions, required):
        return item
    return fallback
