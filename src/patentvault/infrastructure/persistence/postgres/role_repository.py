"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection

from patentvault.domain.entities import Role

_SELECT = (
    "SELECT r.name, r.description, r.created_at, "
    "COALESCE(array_agg(rp.permission) FILTER (WHERE rp.permission IS NOT NULL), '{}') "
    "FROM role r LEFT JOIN role_permission rp ON rp.role_name = r.name"
)


def _row_to_role(r: tuple) -> Role:
    return Role(name=r[0], description=r[1], created_at=r[2], permissions=frozenset(r[3]))


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name, case-insensitive."""
        cur = await self._conn.execute(
            f"{_SELECT} WHERE upper(r.name) = upper(%s) GROUP BY r.name",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"{_SELECT} GROUP BY r.name ORDER BY r.name")
        return [_row_to_role(r) for r in await cur.fetchall()]

    async def create(self, role: Role) -> Role:
        """Create role with its permissions."""
        await self._conn.execute(
            "INSERT INTO role (name, description, created_at) "
            "VALUES (%s, %s, COALESCE(%s, now()))",
            (role.name, role.description, role.created_at),
        )
        await self._insert_permissions(role.name, role.permissions)
        return role

    async def set_permissions(self, name: str, permissions: frozenset[str]) -> None:
        """Replace the permission set of a role."""
        await self._conn.execute("DELETE FROM role_permission WHERE role_name = %s", (name,))
        await self._insert_permissions(name, permissions)

    async def delete(self, name: str) -> None:
        """Delete role; its permissions cascade."""
        await self._conn.execute("DELETE FROM role WHERE name = %s", (name,))

    async def _insert_permissions(self, name: str, permissions: frozenset[str]) -> None:
        if not permissions:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO role_permission (role_name, permission) VALUES (%s, %s)",
                [(name, p) for p in sorted(permissions)],
            )
