"""Fixtures for API tests."""

import falcon.asgi
import pytest
from unittest.mock import AsyncMock

from patentvault.application.dto.verified_token import VerifiedToken
from patentvault.application.use_cases.access.create_rule import CreateAccessRuleUseCase
from patentvault.application.use_cases.access.delete_rule import DeleteAccessRuleUseCase
from patentvault.application.use_cases.access.list_rules import ListAccessRulesUseCase
from patentvault.application.use_cases.access.replace_rules import ReplaceAccessRulesUseCase
from patentvault.application.use_cases.assistant.ask_assistant import AskAssistantUseCase
from patentvault.application.use_cases.logs.list_action_logs import ListActionLogsUseCase
from patentvault.application.use_cases.patent.dashboard_summary import DashboardSummaryUseCase
from patentvault.application.use_cases.patent.delete_patent import DeletePatentUseCase
from patentvault.application.use_cases.patent.export_patents import ExportPatentsUseCase
from patentvault.application.use_cases.patent.import_patents import ImportPatentsUseCase
from patentvault.application.use_cases.patent.list_patents import ListPatentsUseCase
from patentvault.application.use_cases.patent.send_notification import SendNotificationUseCase
from patentvault.application.use_cases.patent.update_patent import UpdatePatentUseCase
from patentvault.application.use_cases.role.create_role import CreateRoleUseCase
from patentvault.application.use_cases.role.delete_role import DeleteRoleUseCase
from patentvault.application.use_cases.role.list_roles import ListRolesUseCase
from patentvault.application.use_cases.role.rename_role import RenameRoleUseCase
from patentvault.application.use_cases.role.update_permissions import (
    UpdateRolePermissionsUseCase,
)
from patentvault.application.use_cases.session.end_session import EndSessionUseCase
from patentvault.application.use_cases.session.start_session import StartSessionUseCase
from patentvault.domain.exceptions import PatentVaultError
from patentvault.domain.services import IdentityNormalizer
from patentvault.domain.value_objects import RuleKind
from patentvault.infrastructure.audit.action_logger import ActionLogger
from patentvault.infrastructure.audit.throttle import ActionThrottle
from patentvault.infrastructure.permission.permission_resolver import RolePermissionResolver
from patentvault.infrastructure.permission.role_resolver import RuleBasedRoleResolver
from patentvault.infrastructure.session.registry import SessionRegistry
from patentvault.interfaces.api.errors import handle_domain_error, handle_unexpected_error
from patentvault.interfaces.api.middleware.auth import AuthMiddleware
from patentvault.interfaces.api.resources.access_rules import (
    AccessRuleResource,
    AccessRulesResource,
    AccessRuleValueResource,
)
from patentvault.interfaces.api.resources.action_logs import ActionLogsResource
from patentvault.interfaces.api.resources.assistant import AssistantResource
from patentvault.interfaces.api.resources.health import HealthResource
from patentvault.interfaces.api.resources.patents import PatentResource, PatentsResource
from patentvault.interfaces.api.resources.roles import (
    RoleRenameResource,
    RoleResource,
    RolesResource,
)
from patentvault.interfaces.api.resources.session import SessionResource

from tests.conftest import FakeUnitOfWork, make_uow_factory

ADMIN = {"Authorization": "Bearer admin-token"}
USER = {"Authorization": "Bearer user-token"}


class FakeAuthProvider:
    """Maps bearer tokens to verified emails; delete a token to revoke it."""

    def __init__(self) -> None:
        self.tokens = {"admin-token": "Boss@co-b.com", "user-token": "user@co-a.com"}
        self.expires_at: dict[str, float] = {}
        self.calls = 0

    async def verify(self, token: str) -> VerifiedToken | None:
        self.calls += 1
        email = self.tokens.get(token)
        if email is None:
            return None
        return VerifiedToken(email=email, expires_at=self.expires_at.get(token))


@pytest.fixture
def api_uow() -> FakeUnitOfWork:
    """Shared UoW - boss@co-a.com is ADMIN by email rule."""
    uow = FakeUnitOfWork()
    uow.access_rules.add_rule("boss@co-a.com", RuleKind.EMAIL, "ADMIN")
    return uow


@pytest.fixture
def registry(clock) -> SessionRegistry:
    """Sessions are re-checked with the provider after 60 fake seconds."""
    return SessionRegistry(ttl_seconds=60.0, clock=clock)


@pytest.fixture
def auth_provider() -> FakeAuthProvider:
    return FakeAuthProvider()


def build_app(
    uow: FakeUnitOfWork,
    registry: SessionRegistry,
    bypass_enabled: bool = False,
    auth_provider: FakeAuthProvider | None = None,
):
    """Falcon ASGI app wired like the composition root, on in-memory fakes."""
    uow_factory = make_uow_factory(uow)
    normalizer = IdentityNormalizer({"co-b.com": "co-a.com"})
    # Zero window so every request is audited.
    action_logger = ActionLogger(uow_factory, ActionThrottle(window_seconds=0))
    generator = AsyncMock()
    generator.generate.return_value = "42"

    start_session = StartSessionUseCase(
        normalizer=normalizer,
        role_resolver=RuleBasedRoleResolver(uow_factory, normalizer),
        permission_resolver=RolePermissionResolver(uow_factory),
        audit_logger=action_logger,
        bypass_identity="boss@co-a.com" if bypass_enabled else None,
    )

    app = falcon.asgi.App(
        middleware=[
            AuthMiddleware(
                registry,
                start_session,
                auth_provider=auth_provider or FakeAuthProvider(),
                bypass_enabled=bypass_enabled,
            )
        ]
    )
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(PatentVaultError, handle_domain_error)

    health = HealthResource()
    patents = PatentsResource(
        ListPatentsUseCase(uow_factory),
        ImportPatentsUseCase(uow_factory, action_logger),
        DashboardSummaryUseCase(uow_factory),
        ExportPatentsUseCase(uow_factory, action_logger),
    )
    patent = PatentResource(
        UpdatePatentUseCase(uow_factory, action_logger),
        DeletePatentUseCase(uow_factory, action_logger),
        SendNotificationUseCase(uow_factory, AsyncMock(), action_logger),
    )
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/session", SessionResource(EndSessionUseCase(action_logger), registry))
    app.add_route(
        "/v1/access-rules",
        AccessRulesResource(
            ListAccessRulesUseCase(uow_factory),
            CreateAccessRuleUseCase(uow_factory, normalizer, action_logger),
        ),
    )
    app.add_route(
        "/v1/access-rules/values/{value}",
        AccessRuleValueResource(ReplaceAccessRulesUseCase(uow_factory, normalizer, action_logger)),
    )
    app.add_route(
        "/v1/access-rules/{rule_id}",
        AccessRuleResource(DeleteAccessRuleUseCase(uow_factory, normalizer, action_logger)),
    )
    app.add_route(
        "/v1/roles",
        RolesResource(ListRolesUseCase(uow_factory), CreateRoleUseCase(uow_factory, action_logger)),
    )
    app.add_route(
        "/v1/roles/{name}",
        RoleResource(
            UpdateRolePermissionsUseCase(uow_factory, action_logger),
            DeleteRoleUseCase(uow_factory, action_logger),
        ),
    )
    app.add_route(
        "/v1/roles/{name}/rename",
        RoleRenameResource(RenameRoleUseCase(uow_factory, action_logger)),
    )
    app.add_route("/v1/action-logs", ActionLogsResource(ListActionLogsUseCase(uow_factory)))
    app.add_route("/v1/patents", patents)
    app.add_route("/v1/patents/summary", patents, suffix="summary")
    app.add_route("/v1/patents/export", patents, suffix="export")
    app.add_route("/v1/patents/{patent_id}", patent)
    app.add_route("/v1/patents/{patent_id}/notify", patent, suffix="notify")
    app.add_route("/v1/assistant", AssistantResource(AskAssistantUseCase(generator, action_logger)))
    return app


@pytest.fixture
def client(api_uow, registry, auth_provider):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(build_app(api_uow, registry, auth_provider=auth_provider))


@pytest.fixture
def bypass_client(api_uow, registry):
    """Test client with offline bypass enabled."""
    from falcon.testing import TestClient
    return TestClient(build_app(api_uow, registry, bypass_enabled=True))
