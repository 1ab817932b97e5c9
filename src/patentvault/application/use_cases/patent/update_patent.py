"""Update patent use case."""

from dataclasses import asdict
from datetime import UTC, datetime
from uuid import UUID

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.dto.patent_dto import PatentInput
from patentvault.application.ports import AuditLogger
from patentvault.domain.entities import AuthorizationContext, Patent
from patentvault.domain.exceptions import NotFound
from patentvault.domain.value_objects import PermissionKey


class UpdatePatentUseCase:
    """Overwrite the editable fields of a patent."""

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        patent_id: UUID,
        data: PatentInput,
        environment: ClientEnvironment | None = None,
    ) -> Patent:
        require(context, PermissionKey.EDIT_PATENT)
        async with self._uow_factory() as uow:
            patent = await uow.patents.get_by_id(patent_id)
            if not patent:
                raise NotFound("Patent", str(patent_id))
            for key, value in asdict(data).items():
                setattr(patent, key, value)
            patent.updated_at = datetime.now(UTC)
            await uow.patents.update(patent)

        await self._audit.log_action(
            context.identity,
            "UPDATE_PATENT",
            target=str(patent_id),
            details={"name": patent.name},
            environment=environment,
        )
        return patent
