"""PostgreSQL access rule repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from patentvault.domain.entities import AccessRule
from patentvault.domain.value_objects import RuleKind

_COLUMNS = "id, value, kind, role, description, created_at"


def _row_to_rule(r: tuple) -> AccessRule:
    return AccessRule(
        id=r[0],
        value=r[1],
        kind=RuleKind(r[2]),
        role=r[3],
        description=r[4],
        created_at=r[5],
    )


class PostgresAccessRuleRepository:
    """Access rule repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, rule_id: UUID) -> AccessRule | None:
        """Get rule by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM access_rule WHERE id = %s",
            (rule_id,),
        )
        r = await cur.fetchone()
        return _row_to_rule(r) if r else None

    async def list_all(self) -> list[AccessRule]:
        """List rules, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM access_rule ORDER BY created_at DESC"
        )
        return [_row_to_rule(r) for r in await cur.fetchall()]

    async def find(self, value: str, kind: RuleKind) -> list[AccessRule]:
        """Rules for an exact value, oldest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM access_rule WHERE value = %s AND kind = %s "
            "ORDER BY created_at, role",
            (value.lower(), str(kind)),
        )
        return [_row_to_rule(r) for r in await cur.fetchall()]

    async def list_by_role(self, role: str) -> list[AccessRule]:
        """Rules granting role."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM access_rule WHERE role = %s",
            (role,),
        )
        return [_row_to_rule(r) for r in await cur.fetchall()]

    async def create(self, rule: AccessRule) -> bool:
        """Insert rule unless (value, kind, role) already exists."""
        cur = await self._conn.execute(
            f"INSERT INTO access_rule ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (value, kind, role) DO NOTHING",
            (
                rule.id,
                rule.value.lower(),
                str(rule.kind),
                rule.role,
                rule.description,
                rule.created_at,
            ),
        )
        return cur.rowcount == 1

    async def delete(self, rule_id: UUID) -> None:
        """Delete rule."""
        await self._conn.execute("DELETE FROM access_rule WHERE id = %s", (rule_id,))

    async def delete_matching(self, value: str, kind: RuleKind, role: str | None = None) -> int:
        """Delete rules for value, optionally only those granting role."""
        if role is None:
            cur = await self._conn.execute(
                "DELETE FROM access_rule WHERE value = %s AND kind = %s",
                (value.lower(), str(kind)),
            )
        else:
            cur = await self._conn.execute(
                "DELETE FROM access_rule WHERE value = %s AND kind = %s AND role = %s",
                (value.lower(), str(kind), role),
            )
        return cur.rowcount

    async def reassign_role(self, old_role: str, new_role: str) -> int:
        """Point every rule granting old_role at new_role."""
        cur = await self._conn.execute(
            "UPDATE access_rule SET role = %s WHERE role = %s",
            (new_role, old_role),
        )
        return cur.rowcount
