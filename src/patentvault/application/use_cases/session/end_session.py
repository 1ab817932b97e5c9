"""End session use case."""

from loguru import logger

from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.domain.entities import AuthorizationContext


class EndSessionUseCase:
    """Record logout for a session."""

    def __init__(self, audit_logger: AuditLogger) -> None:
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        environment: ClientEnvironment | None = None,
    ) -> None:
        logger.info(f"Session ended for {context.canonical_identity}")
        await self._audit.log_action(
            context.canonical_identity, "LOGOUT", environment=environment
        )
