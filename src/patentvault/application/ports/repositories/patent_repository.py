"""Patent repository port."""

from typing import Protocol
from uuid import UUID

from patentvault.domain.entities import Patent


class PatentRepository(Protocol):
    """Port for patent record persistence."""

    async def get_by_id(self, patent_id: UUID) -> Patent | None: ...

    async def list_all(self) -> list[Patent]: ...

    async def create_batch(self, patents: list[Patent]) -> list[Patent]: ...

    async def update(self, patent: Patent) -> None: ...

    async def delete(self, patent_id: UUID) -> None: ...

    async def count_by_status(self) -> dict[str, int]: ...
