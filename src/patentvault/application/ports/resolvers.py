"""Resolver ports - identity to role, role to permissions."""

from typing import Protocol


class RoleResolver(Protocol):
    """Port for resolving the effective role of an email. Never raises."""

    async def resolve(self, raw_email: str) -> str: ...


class PermissionResolver(Protocol):
    """Port for resolving the permission keys of a role. Never raises."""

    async def resolve(self, role_name: str) -> frozenset[str]: ...
