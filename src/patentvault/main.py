"""Application entry point and composition root."""

import falcon.asgi
from loguru import logger

from patentvault import __version__
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
from patentvault.config import get_settings
from patentvault.domain.exceptions import PatentVaultError
from patentvault.domain.services import IdentityNormalizer
from patentvault.infrastructure.assistant.openai_generator import OpenAITextGenerator
from patentvault.infrastructure.audit.action_logger import ActionLogger
from patentvault.infrastructure.audit.throttle import ActionThrottle
from patentvault.infrastructure.auth.keycloak_provider import KeycloakProvider
from patentvault.infrastructure.network.ip_lookup import HttpIpLookup
from patentvault.infrastructure.notification.log_notifier import LogNotifier
from patentvault.infrastructure.permission.permission_resolver import RolePermissionResolver
from patentvault.infrastructure.permission.role_resolver import RuleBasedRoleResolver
from patentvault.infrastructure.persistence.postgres.connection import create_pool
from patentvault.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from patentvault.infrastructure.session.registry import SessionRegistry
from patentvault.interfaces.api.errors import handle_domain_error, handle_unexpected_error
from patentvault.interfaces.api.middleware.auth import AuthMiddleware
from patentvault.interfaces.api.middleware.cors import CORSMiddleware
from patentvault.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from patentvault.logging_config import configure_logging


def main() -> None:
    """CLI entry point."""
    run_server()


def create_patentvault_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)
    logger.info(f"PatentVault v{__version__} ({settings.environment})")

    pool = create_pool(settings.database_url, timeout=settings.database_pool_timeout)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None and not settings.auth_bypass_enabled:
        logger.warning("No Keycloak secret and bypass disabled: every request is anonymous")

    normalizer = IdentityNormalizer(settings.domain_aliases)
    role_resolver = RuleBasedRoleResolver(uow_factory, normalizer)
    permission_resolver = RolePermissionResolver(uow_factory)
    action_logger = ActionLogger(
        uow_factory,
        ActionThrottle(settings.log_throttle_seconds, settings.log_throttle_max_keys),
        ip_lookup=HttpIpLookup(settings.ip_lookup_url, settings.ip_lookup_timeout),
        background=True,
    )
    text_generator = OpenAITextGenerator(
        base_url=settings.assistant_api_url,
        api_key=settings.assistant_api_key,
        model=settings.assistant_model,
    )

    start_session = StartSessionUseCase(
        normalizer=normalizer,
        role_resolver=role_resolver,
        permission_resolver=permission_resolver,
        audit_logger=action_logger,
        bypass_identity=settings.bypass_identity if settings.auth_bypass_enabled else None,
    )
    end_session = EndSessionUseCase(action_logger)
    registry = SessionRegistry(
        settings.session_cache_size, ttl_seconds=settings.session_revalidate_seconds
    )

    access_rules_resource = AccessRulesResource(
        ListAccessRulesUseCase(uow_factory),
        CreateAccessRuleUseCase(uow_factory, normalizer, action_logger),
    )
    access_rule_value_resource = AccessRuleValueResource(
        ReplaceAccessRulesUseCase(uow_factory, normalizer, action_logger)
    )
    access_rule_resource = AccessRuleResource(
        DeleteAccessRuleUseCase(uow_factory, normalizer, action_logger)
    )
    roles_resource = RolesResource(
        ListRolesUseCase(uow_factory),
        CreateRoleUseCase(uow_factory, action_logger),
    )
    role_resource = RoleResource(
        UpdateRolePermissionsUseCase(uow_factory, action_logger),
        DeleteRoleUseCase(uow_factory, action_logger),
    )
    role_rename_resource = RoleRenameResource(RenameRoleUseCase(uow_factory, action_logger))
    patents_resource = PatentsResource(
        ListPatentsUseCase(uow_factory),
        ImportPatentsUseCase(uow_factory, action_logger),
        DashboardSummaryUseCase(uow_factory),
        ExportPatentsUseCase(uow_factory, action_logger),
    )
    patent_resource = PatentResource(
        UpdatePatentUseCase(uow_factory, action_logger),
        DeletePatentUseCase(uow_factory, action_logger),
        SendNotificationUseCase(uow_factory, LogNotifier(), action_logger),
    )
    assistant_resource = AssistantResource(AskAssistantUseCase(text_generator, action_logger))
    action_logs_resource = ActionLogsResource(ListActionLogsUseCase(uow_factory))
    session_resource = SessionResource(end_session, registry)
    health_resource = HealthResource(pool)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool, action_logger),
            AuthMiddleware(
                registry,
                start_session,
                auth_provider=keycloak,
                bypass_enabled=settings.auth_bypass_enabled,
            ),
        ],
    )

    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(PatentVaultError, handle_domain_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/session", session_resource)
    app.add_route("/v1/access-rules", access_rules_resource)
    app.add_route("/v1/access-rules/values/{value}", access_rule_value_resource)
    app.add_route("/v1/access-rules/{rule_id}", access_rule_resource)
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{name}", role_resource)
    app.add_route("/v1/roles/{name}/rename", role_rename_resource)
    app.add_route("/v1/action-logs", action_logs_resource)
    app.add_route("/v1/patents", patents_resource)
    app.add_route("/v1/patents/summary", patents_resource, suffix="summary")
    app.add_route("/v1/patents/export", patents_resource, suffix="export")
    app.add_route("/v1/patents/{patent_id}", patent_resource)
    app.add_route("/v1/patents/{patent_id}/notify", patent_resource, suffix="notify")

    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_patentvault_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
