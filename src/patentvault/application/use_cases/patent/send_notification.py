"""Send notification use case."""

from uuid import UUID

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger, Notifier
from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.exceptions import NotFound, ValidationError
from patentvault.domain.value_objects import PermissionKey


class SendNotificationUseCase:
    """Email a patent's notification recipients."""

    def __init__(
        self,
        unit_of_work_factory: type,
        notifier: Notifier,
        audit_logger: AuditLogger,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._notifier = notifier
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        patent_id: UUID,
        subject: str,
        body: str,
        environment: ClientEnvironment | None = None,
    ) -> list[str]:
        """Send and return the recipients."""
        require(context, PermissionKey.SEND_EMAIL)
        async with self._uow_factory() as uow:
            patent = await uow.patents.get_by_id(patent_id)
        if not patent:
            raise NotFound("Patent", str(patent_id))
        recipients = patent.recipients
        if not recipients:
            raise ValidationError(f"Patent {patent.name} has no notification emails")

        await self._notifier.send(recipients, subject, body)
        await self._audit.log_action(
            context.identity,
            "SEND_EMAIL",
            target=str(patent_id),
            details={"recipients": recipients, "subject": subject},
            environment=environment,
        )
        return recipients
