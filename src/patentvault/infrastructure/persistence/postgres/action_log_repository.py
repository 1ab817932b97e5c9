"""PostgreSQL action log repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from patentvault.domain.entities import ActionLogEntry


class PostgresActionLogRepository:
    """Append-only action log repository."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, entry: ActionLogEntry) -> None:
        """Insert one entry."""
        await self._conn.execute(
            "INSERT INTO action_log (id, actor, action, target, details, created_at) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.actor,
                entry.action,
                entry.target,
                Jsonb(entry.details),
                entry.created_at,
            ),
        )

    async def list_recent(
        self,
        *,
        limit: int = 100,
        actor: str | None = None,
        action: str | None = None,
    ) -> list[ActionLogEntry]:
        """Newest entries first."""
        clauses = []
        params: list = []
        if actor:
            clauses.append("actor = %s")
            params.append(actor)
        if action:
            clauses.append("action = %s")
            params.append(action)
        where = f"WHERE {' AND '.join(clauses)} " if clauses else ""
        params.append(limit)
        cur = await self._conn.execute(
            "SELECT id, actor, action, target, details, created_at FROM action_log "
            f"{where}ORDER BY created_at DESC LIMIT %s",
            params,
        )
        rows = await cur.fetchall()
        return [
            ActionLogEntry(
                id=r[0],
                actor=r[1],
                action=r[2],
                target=r[3],
                details=r[4] or {},
                created_at=r[5],
            )
            for r in rows
        ]
