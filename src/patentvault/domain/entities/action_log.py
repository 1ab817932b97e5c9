"""Action log entry - append-only audit record."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class ActionLogEntry:
    """Audit record of one security-relevant action."""

    id: UUID
    actor: str
    action: str
    created_at: datetime
    target: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
