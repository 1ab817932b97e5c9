"""Start session use case - resolve identity into an authorization context."""

from loguru import logger

from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger, PermissionResolver, RoleResolver
from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.exceptions import AuthenticationRequired
from patentvault.domain.services import IdentityNormalizer


class StartSessionUseCase:
    """Build the session context from a verified email, or the bypass identity."""

    def __init__(
        self,
        normalizer: IdentityNormalizer,
        role_resolver: RoleResolver,
        permission_resolver: PermissionResolver,
        audit_logger: AuditLogger,
        bypass_identity: str | None = None,
    ) -> None:
        self._normalizer = normalizer
        self._role_resolver = role_resolver
        self._permission_resolver = permission_resolver
        self._audit = audit_logger
        self._bypass_identity = bypass_identity

    async def execute(
        self,
        identity: str | None,
        environment: ClientEnvironment | None = None,
    ) -> AuthorizationContext:
        """Resolve role and permissions once for the session lifetime."""
        bypass = False
        if not identity:
            if not self._bypass_identity:
                raise AuthenticationRequired("No authenticated identity")
            identity = self._bypass_identity
            bypass = True
            logger.info(f"No authenticated session; using bypass identity {identity}")

        identity = identity.strip()
        canonical = self._normalizer.normalize(identity)
        role = await self._role_resolver.resolve(canonical)
        permissions = await self._permission_resolver.resolve(role)
        context = AuthorizationContext(
            identity=identity,
            canonical_identity=canonical,
            effective_role=role,
            granted_permissions=permissions,
            bypass=bypass,
        )

        logger.info(f"Session started for {canonical} as {role}")
        await self._audit.log_action(
            canonical,
            "LOGIN",
            details={"role": role, "bypass": bypass},
            environment=environment,
        )
        return context
