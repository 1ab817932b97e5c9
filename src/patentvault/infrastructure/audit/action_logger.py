"""Action logger - throttled, enriched, best-effort audit trail."""

import asyncio
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from loguru import logger

from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import IpLookup
from patentvault.domain.entities import ActionLogEntry
from patentvault.domain.exceptions import LogWriteFailure
from patentvault.infrastructure.audit.throttle import ActionThrottle
from patentvault.infrastructure.audit.user_agent import UNKNOWN, parse_user_agent

ANONYMOUS = "anonymous"


class ActionLogger:
    """Records actions to the action log.

    Logging never fails the calling operation: throttled calls are dropped,
    enrichment falls back to "Unknown", and write errors are only reported
    locally.

    With background=True the throttle decision is made inline and the
    enrichment and write run as a task, so the caller never waits on the
    IP lookup or the log store. drain() awaits writes still in flight.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        throttle: ActionThrottle,
        ip_lookup: IpLookup | None = None,
        background: bool = False,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._throttle = throttle
        self._ip_lookup = ip_lookup
        self._background = background
        self._pending: set[asyncio.Task] = set()

    async def log_action(
        self,
        actor: str | None,
        action: str,
        target: str | None = None,
        details: dict[str, Any] | None = None,
        environment: ClientEnvironment | None = None,
    ) -> bool:
        """Write one entry.

        Returns False if throttled. Awaited writes also return False when the
        write failed; background writes return True once scheduled.
        """
        actor = actor or ANONYMOUS
        if not self._throttle.should_record(actor, action):
            logger.debug(f"Throttled {action} by {actor}")
            return False

        record = self._record(actor, action, target, details, environment)
        if not self._background:
            return await record
        task = asyncio.create_task(record)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return True

    async def drain(self) -> None:
        """Wait for background writes still in flight."""
        if self._pending:
            await asyncio.gather(*self._pending)

    async def _record(
        self,
        actor: str,
        action: str,
        target: str | None,
        details: dict[str, Any] | None,
        environment: ClientEnvironment | None,
    ) -> bool:
        try:
            env_fields = await self._enrich(environment or ClientEnvironment())
            entry = ActionLogEntry(
                id=uuid4(),
                actor=actor,
                action=action,
                target=target,
                details={**(details or {}), **env_fields},
                created_at=datetime.now(UTC),
            )
            await self._append(entry)
        except LogWriteFailure as e:
            logger.warning(str(e))
            return False
        return True

    async def _enrich(self, environment: ClientEnvironment) -> dict[str, str]:
        ip = environment.ip_address
        if not ip and self._ip_lookup is not None:
            try:
                ip = await self._ip_lookup.lookup()
            except Exception as e:
                logger.debug(f"IP lookup raised: {e}")
                ip = None
        browser, system = parse_user_agent(environment.user_agent)
        return {"ip_address": ip or UNKNOWN, "browser": browser, "os": system}

    async def _append(self, entry: ActionLogEntry) -> None:
        try:
            async with self._uow_factory() as uow:
                await uow.action_logs.append(entry)
        except Exception as e:
            raise LogWriteFailure(f"Failed to write {entry.action} log for {entry.actor}: {e}") from e
