"""Pytest fixtures for PatentVault tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from patentvault.domain.entities import (
    ADMIN_ROLE,
    USER_ROLE,
    AccessRule,
    ActionLogEntry,
    AuthorizationContext,
    Patent,
    Role,
)
from patentvault.domain.services import IdentityNormalizer
from patentvault.domain.value_objects import PermissionKey, RuleKind

ALL_KEYS = frozenset(k.value for k in PermissionKey)
USER_KEYS = frozenset({PermissionKey.VIEW_DASHBOARD.value, PermissionKey.VIEW_LIST.value})
T0 = datetime(2024, 1, 1, tzinfo=UTC)


class StoreUnavailable(RuntimeError):
    """Raised by fakes configured to fail."""


# --- Fake repositories ---


class FakeAccessRuleRepository:
    """In-memory access rule repository with (value, kind, role) uniqueness."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, AccessRule] = {}
        self.fail_find = False
        self.fail_reassign = False

    async def get_by_id(self, rule_id: UUID) -> AccessRule | None:
        return self._by_id.get(rule_id)

    async def list_all(self) -> list[AccessRule]:
        return sorted(self._by_id.values(), key=lambda r: r.created_at, reverse=True)

    async def find(self, value: str, kind: RuleKind) -> list[AccessRule]:
        if self.fail_find:
            raise StoreUnavailable("rule store down")
        rules = [r for r in self._by_id.values() if r.value == value and r.kind == kind]
        return sorted(rules, key=lambda r: r.created_at)

    async def list_by_role(self, role: str) -> list[AccessRule]:
        return [r for r in self._by_id.values() if r.role == role]

    async def create(self, rule: AccessRule) -> bool:
        for r in self._by_id.values():
            if (r.value, r.kind, r.role) == (rule.value, rule.kind, rule.role):
                return False
        self._by_id[rule.id] = rule
        return True

    async def delete(self, rule_id: UUID) -> None:
        self._by_id.pop(rule_id, None)

    async def delete_matching(self, value: str, kind: RuleKind, role: str | None = None) -> int:
        ids = [
            r.id
            for r in self._by_id.values()
            if r.value == value and r.kind == kind and (role is None or r.role == role)
        ]
        for rid in ids:
            del self._by_id[rid]
        return len(ids)

    async def reassign_role(self, old_role: str, new_role: str) -> int:
        if self.fail_reassign:
            raise StoreUnavailable("reassign failed")
        moved = 0
        for rid, r in list(self._by_id.items()):
            if r.role == old_role:
                self._by_id[rid] = replace(r, role=new_role)
                moved += 1
        return moved

    def add_rule(
        self,
        value: str,
        kind: RuleKind,
        role: str,
        created_at: datetime = T0,
    ) -> AccessRule:
        rule = AccessRule(id=uuid4(), value=value, kind=kind, role=role, created_at=created_at)
        self._by_id[rule.id] = rule
        return rule


class FakeRoleRepository:
    """In-memory role repository, case-insensitive by name."""

    def __init__(self) -> None:
        self._by_name: dict[str, Role] = {}
        self.fail_get = False
        self.fail_delete = False

    async def get_by_name(self, name: str) -> Role | None:
        if self.fail_get:
            raise StoreUnavailable("role store down")
        role = self._by_name.get(name.upper())
        return replace(role) if role else None

    async def list_all(self) -> list[Role]:
        return sorted(self._by_name.values(), key=lambda r: r.name)

    async def create(self, role: Role) -> Role:
        self._by_name[role.name.upper()] = replace(role)
        return role

    async def set_permissions(self, name: str, permissions: frozenset[str]) -> None:
        role = self._by_name[name.upper()]
        self._by_name[name.upper()] = replace(role, permissions=frozenset(permissions))

    async def delete(self, name: str) -> None:
        if self.fail_delete:
            raise StoreUnavailable("delete failed")
        self._by_name.pop(name.upper(), None)

    def add_role(self, role: Role) -> None:
        """Seed a role (test helper)."""
        self._by_name[role.name.upper()] = role


class FakeActionLogRepository:
    """In-memory append-only action log."""

    def __init__(self) -> None:
        self.entries: list[ActionLogEntry] = []
        self.fail_append = False

    async def append(self, entry: ActionLogEntry) -> None:
        if self.fail_append:
            raise StoreUnavailable("log store down")
        self.entries.append(entry)

    async def list_recent(
        self,
        *,
        limit: int = 100,
        actor: str | None = None,
        action: str | None = None,
    ) -> list[ActionLogEntry]:
        items = [
            e
            for e in self.entries
            if (actor is None or e.actor == actor) and (action is None or e.action == action)
        ]
        items.sort(key=lambda e: e.created_at, reverse=True)
        return items[:limit]


class FakePatentRepository:
    """In-memory patent repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Patent] = {}

    async def get_by_id(self, patent_id: UUID) -> Patent | None:
        patent = self._by_id.get(patent_id)
        return replace(patent) if patent else None

    async def list_all(self) -> list[Patent]:
        return sorted(self._by_id.values(), key=lambda p: p.created_at, reverse=True)

    async def create_batch(self, patents: list[Patent]) -> list[Patent]:
        for p in patents:
            self._by_id[p.id] = p
        return patents

    async def update(self, patent: Patent) -> None:
        self._by_id[patent.id] = replace(patent)

    async def delete(self, patent_id: UUID) -> None:
        self._by_id.pop(patent_id, None)

    async def count_by_status(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for p in self._by_id.values():
            counts[p.status] = counts.get(p.status, 0) + 1
        return counts

    def add_patent(self, name: str = "Widget", status: str = "granted", **kwargs) -> Patent:
        """Seed a patent (test helper)."""
        fields = {
            "patentee": "Acme",
            "country": "KR",
            "app_number": "10-2024-0001",
            "notification_emails": None,
            **kwargs,
        }
        patent = Patent(
            id=uuid4(), name=name, status=status, created_at=T0, updated_at=T0, **fields
        )
        self._by_id[patent.id] = patent
        return patent


# --- Unit of Work ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self, seed_builtins: bool = True) -> None:
        self.access_rules = FakeAccessRuleRepository()
        self.roles = FakeRoleRepository()
        self.action_logs = FakeActionLogRepository()
        self.patents = FakePatentRepository()
        self.rollbacks = 0
        if seed_builtins:
            self.roles.add_role(Role(name=ADMIN_ROLE, permissions=ALL_KEYS, created_at=T0))
            self.roles.add_role(Role(name=USER_ROLE, permissions=USER_KEYS, created_at=T0))

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        self.rollbacks += 1


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, so state survives across calls."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


def failing_uow_factory():
    """Factory whose store cannot be reached at all."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        raise StoreUnavailable("connection refused")
        yield  # pragma: no cover

    return _factory


def make_context(
    role: str = ADMIN_ROLE,
    permissions: frozenset[str] = ALL_KEYS,
    identity: str = "admin@co-a.com",
) -> AuthorizationContext:
    return AuthorizationContext(
        identity=identity,
        canonical_identity=identity.lower(),
        effective_role=role,
        granted_permissions=permissions,
    )


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork with built-in roles seeded."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def normalizer() -> IdentityNormalizer:
    """co-b.com is an alias of co-a.com."""
    return IdentityNormalizer({"co-b.com": "co-a.com"})


@pytest.fixture
def admin_context() -> AuthorizationContext:
    return make_context()


@pytest.fixture
def user_context() -> AuthorizationContext:
    return make_context(role=USER_ROLE, permissions=USER_KEYS, identity="user@co-a.com")


@pytest.fixture
def audit_logger():
    """AsyncMock for AuditLogger - log_action returns True."""
    mock = AsyncMock()
    mock.log_action.return_value = True
    return mock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def later(seconds: int) -> datetime:
    return T0 + timedelta(seconds=seconds)
