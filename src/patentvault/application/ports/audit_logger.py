"""Audit logger port - best-effort action logging."""

from typing import Any, Protocol

from patentvault.application.dto.client_environment import ClientEnvironment


class AuditLogger(Protocol):
    """Port for recording security-relevant actions.

    Never raises. Implementations may finish the write after returning, so
    callers do not wait on the log store.
    """

    async def log_action(
        self,
        actor: str | None,
        action: str,
        target: str | None = None,
        details: dict[str, Any] | None = None,
        environment: ClientEnvironment | None = None,
    ) -> bool: ...
