"""Action log repository port."""

from typing import Protocol

from patentvault.domain.entities import ActionLogEntry


class ActionLogRepository(Protocol):
    """Port for the append-only action log."""

    async def append(self, entry: ActionLogEntry) -> None: ...

    async def list_recent(
        self,
        *,
        limit: int = 100,
        actor: str | None = None,
        action: str | None = None,
    ) -> list[ActionLogEntry]: ...
