"""PostgreSQL patent repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from patentvault.domain.entities import Patent

_COLUMNS = (
    "id, name, patentee, country, status, app_number, "
    "annuity_date, notification_emails, created_at, updated_at"
)


def _row_to_patent(r: tuple) -> Patent:
    return Patent(
        id=r[0],
        name=r[1],
        patentee=r[2],
        country=r[3],
        status=r[4],
        app_number=r[5],
        annuity_date=r[6],
        notification_emails=r[7],
        created_at=r[8],
        updated_at=r[9],
    )


class PostgresPatentRepository:
    """Patent repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, patent_id: UUID) -> Patent | None:
        """Get patent by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM patent WHERE id = %s",
            (patent_id,),
        )
        r = await cur.fetchone()
        return _row_to_patent(r) if r else None

    async def list_all(self) -> list[Patent]:
        """List patents, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM patent ORDER BY created_at DESC"
        )
        return [_row_to_patent(r) for r in await cur.fetchall()]

    async def create_batch(self, patents: list[Patent]) -> list[Patent]:
        """Insert patents."""
        async with self._conn.cursor() as cur:
            await cur.executemany(
                f"INSERT INTO patent ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
                [
                    (
                        p.id,
                        p.name,
                        p.patentee,
                        p.country,
                        p.status,
                        p.app_number,
                        p.annuity_date,
                        p.notification_emails,
                        p.created_at,
                        p.updated_at,
                    )
                    for p in patents
                ],
            )
        return patents

    async def update(self, patent: Patent) -> None:
        """Update patent fields."""
        await self._conn.execute(
            "UPDATE patent SET name=%s, patentee=%s, country=%s, status=%s, app_number=%s, "
            "annuity_date=%s, notification_emails=%s, updated_at=%s WHERE id=%s",
            (
                patent.name,
                patent.patentee,
                patent.country,
                patent.status,
                patent.app_number,
                patent.annuity_date,
                patent.notification_emails,
                patent.updated_at,
                patent.id,
            ),
        )

    async def delete(self, patent_id: UUID) -> None:
        """Delete patent."""
        await self._conn.execute("DELETE FROM patent WHERE id = %s", (patent_id,))

    async def count_by_status(self) -> dict[str, int]:
        """Number of patents per status."""
        cur = await self._conn.execute("SELECT status, count(*) FROM patent GROUP BY status")
        return {r[0]: r[1] for r in await cur.fetchall()}
