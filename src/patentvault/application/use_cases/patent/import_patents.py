"""Import patents use case - rows already parsed from the upload."""

from dataclasses import asdict
from datetime import UTC, datetime
from uuid import uuid4

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.dto.patent_dto import PatentInput
from patentvault.application.ports import AuditLogger
from patentvault.domain.entities import AuthorizationContext, Patent
from patentvault.domain.exceptions import ValidationError
from patentvault.domain.value_objects import PermissionKey


class ImportPatentsUseCase:
    """Insert a batch of patents."""

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        rows: list[PatentInput],
        environment: ClientEnvironment | None = None,
    ) -> list[Patent]:
        require(context, PermissionKey.IMPORT_DATA)
        if not rows:
            raise ValidationError("Nothing to import")
        missing = [i for i, r in enumerate(rows) if not r.name.strip()]
        if missing:
            raise ValidationError(f"Rows without a name: {missing}")

        now = datetime.now(UTC)
        patents = [
            Patent(id=uuid4(), created_at=now, updated_at=now, **asdict(r)) for r in rows
        ]
        async with self._uow_factory() as uow:
            await uow.patents.create_batch(patents)

        await self._audit.log_action(
            context.identity,
            "IMPORT_PATENTS",
            details={"count": len(patents)},
            environment=environment,
        )
        return patents
