"""Tests for RolePermissionResolver."""

import pytest

from patentvault.domain.entities import Role
from patentvault.domain.value_objects import PermissionKey
from patentvault.infrastructure.permission.permission_resolver import RolePermissionResolver

from tests.conftest import ALL_KEYS, USER_KEYS, failing_uow_factory


@pytest.mark.asyncio
async def test_builtin_roles(uow_factory) -> None:
    resolver = RolePermissionResolver(uow_factory)
    assert await resolver.resolve("ADMIN") == ALL_KEYS
    assert await resolver.resolve("USER") == USER_KEYS


@pytest.mark.asyncio
async def test_case_insensitive(uow_factory) -> None:
    assert await RolePermissionResolver(uow_factory).resolve("admin") == ALL_KEYS


@pytest.mark.asyncio
async def test_custom_role(fake_uow, uow_factory) -> None:
    fake_uow.roles.add_role(Role(name="AUDITOR", permissions=frozenset({PermissionKey.VIEW_LOGS})))
    assert await RolePermissionResolver(uow_factory).resolve("AUDITOR") == {"view-logs"}


@pytest.mark.asyncio
async def test_missing_role_grants_nothing(uow_factory) -> None:
    assert await RolePermissionResolver(uow_factory).resolve("GHOST") == frozenset()


@pytest.mark.asyncio
async def test_store_error_grants_nothing(fake_uow, uow_factory) -> None:
    fake_uow.roles.fail_get = True
    assert await RolePermissionResolver(uow_factory).resolve("ADMIN") == frozenset()


@pytest.mark.asyncio
async def test_unreachable_store_grants_nothing() -> None:
    assert await RolePermissionResolver(failing_uow_factory()).resolve("ADMIN") == frozenset()
