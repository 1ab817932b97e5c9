"""Role repository port."""

from typing import Protocol

from patentvault.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence. Name lookups are case-insensitive."""

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def set_permissions(self, name: str, permissions: frozenset[str]) -> None: ...

    async def delete(self, name: str) -> None: ...
