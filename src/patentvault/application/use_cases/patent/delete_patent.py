"""Delete patent use case."""

from uuid import UUID

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.exceptions import NotFound
from patentvault.domain.value_objects import PermissionKey


class DeletePatentUseCase:
    """Delete a patent record."""

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        patent_id: UUID,
        environment: ClientEnvironment | None = None,
    ) -> None:
        require(context, PermissionKey.DELETE_PATENT)
        async with self._uow_factory() as uow:
            patent = await uow.patents.get_by_id(patent_id)
            if not patent:
                raise NotFound("Patent", str(patent_id))
            await uow.patents.delete(patent_id)

        await self._audit.log_action(
            context.identity,
            "DELETE_PATENT",
            target=str(patent_id),
            details={"name": patent.name},
            environment=environment,
        )
