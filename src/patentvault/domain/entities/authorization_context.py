"""Authorization context - session-scoped identity and granted permissions."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class AuthorizationContext:
    """Resolved once at session start and passed to every gated operation.

    Permissions are not refreshed mid-session; rule and role changes apply
    at the next login.
    """

    identity: str
    canonical_identity: str
    effective_role: str
    granted_permissions: frozenset[str]
    bypass: bool = False
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
