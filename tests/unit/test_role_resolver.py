"""Tests for RuleBasedRoleResolver."""

import pytest

from patentvault.application.use_cases.access.create_rule import CreateAccessRuleUseCase
from patentvault.domain.entities import Role
from patentvault.domain.services import effective_role
from patentvault.domain.value_objects import RuleKind
from patentvault.infrastructure.permission.role_resolver import RuleBasedRoleResolver

from tests.conftest import failing_uow_factory, later


@pytest.fixture
def resolver(uow_factory, normalizer) -> RuleBasedRoleResolver:
    return RuleBasedRoleResolver(uow_factory, normalizer)


@pytest.mark.asyncio
async def test_no_rules_defaults_to_user(resolver) -> None:
    assert await resolver.resolve("nobody@elsewhere.org") == "USER"


@pytest.mark.asyncio
async def test_email_rule(fake_uow, resolver) -> None:
    fake_uow.access_rules.add_rule("a@co-a.com", RuleKind.EMAIL, "ADMIN")
    assert await resolver.resolve("A@CO-A.com") == "ADMIN"


@pytest.mark.asyncio
async def test_domain_rule(fake_uow, resolver) -> None:
    fake_uow.access_rules.add_rule("co-a.com", RuleKind.DOMAIN, "ADMIN")
    assert await resolver.resolve("anyone@co-a.com") == "ADMIN"


@pytest.mark.asyncio
async def test_email_beats_domain(fake_uow, resolver) -> None:
    fake_uow.access_rules.add_rule("co-a.com", RuleKind.DOMAIN, "ADMIN", later(0))
    fake_uow.access_rules.add_rule("x@co-a.com", RuleKind.EMAIL, "USER", later(60))
    assert await resolver.resolve("x@co-a.com") == "USER"


@pytest.mark.asyncio
async def test_alias_input_resolves_through_canonical(fake_uow, resolver) -> None:
    fake_uow.access_rules.add_rule("bob@co-a.com", RuleKind.EMAIL, "ADMIN")
    assert await resolver.resolve("Bob@co-b.com") == "ADMIN"


@pytest.mark.asyncio
async def test_multiple_email_rules_oldest_wins(fake_uow, resolver) -> None:
    fake_uow.roles.add_role(Role(name="EDITOR"))
    fake_uow.access_rules.add_rule("x@co-a.com", RuleKind.EMAIL, "EDITOR", later(30))
    fake_uow.access_rules.add_rule("x@co-a.com", RuleKind.EMAIL, "ADMIN", later(0))
    assert await resolver.resolve("x@co-a.com") == "ADMIN"


@pytest.mark.asyncio
async def test_store_outage_falls_back_to_default(normalizer) -> None:
    resolver = RuleBasedRoleResolver(failing_uow_factory(), normalizer)
    assert await resolver.resolve("a@co-a.com") == "USER"


@pytest.mark.asyncio
async def test_find_error_counts_as_no_match(fake_uow, resolver) -> None:
    fake_uow.access_rules.add_rule("co-a.com", RuleKind.DOMAIN, "ADMIN")
    fake_uow.access_rules.fail_find = True
    assert await resolver.resolve("a@co-a.com") == "USER"


@pytest.mark.asyncio
async def test_rule_created_under_alias_resolves_from_both_domains(
    uow_factory, normalizer, admin_context, audit_logger, resolver
) -> None:
    """Admin adds a rule for the alias domain address; both spellings resolve."""
    create = CreateAccessRuleUseCase(uow_factory, normalizer, audit_logger)
    await create.execute(admin_context, "Dana@CO-B.com", RuleKind.EMAIL, "admin")

    assert await resolver.resolve("dana@co-a.com") == "ADMIN"
    assert await resolver.resolve("dana@co-b.com") == "ADMIN"


@pytest.mark.asyncio
async def test_resolution_matches_effective_role_of_stored_rules(fake_uow, resolver) -> None:
    """Same-instant EMAIL rules tie-break on role name, as in the admin grouped view."""
    fake_uow.roles.add_role(Role(name="ZED"))
    fake_uow.access_rules.add_rule("x@co-a.com", RuleKind.EMAIL, "ZED", later(0))
    fake_uow.access_rules.add_rule("x@co-a.com", RuleKind.EMAIL, "ADMIN", later(0))
    fake_uow.access_rules.add_rule("co-a.com", RuleKind.DOMAIN, "USER", later(-60))

    expected = effective_role(
        await fake_uow.access_rules.find("x@co-a.com", RuleKind.EMAIL),
        await fake_uow.access_rules.find("co-a.com", RuleKind.DOMAIN),
        "USER",
    )
    assert expected == "ADMIN"
    assert await resolver.resolve("X@co-b.com") == expected


@pytest.mark.asyncio
async def test_resolver_delegates_precedence(fake_uow, resolver, monkeypatch) -> None:
    calls = []

    def fake_effective_role(email_rules, domain_rules, default):
        calls.append(([r.value for r in email_rules], [r.value for r in domain_rules], default))
        return "SENTINEL"

    monkeypatch.setattr(
        "patentvault.infrastructure.permission.role_resolver.effective_role", fake_effective_role
    )
    fake_uow.access_rules.add_rule("co-a.com", RuleKind.DOMAIN, "ADMIN")

    assert await resolver.resolve("a@co-a.com") == "SENTINEL"
    assert calls == [([], ["co-a.com"], "USER")]
