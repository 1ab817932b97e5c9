"""Export patents use case - flat rows for spreadsheet writers."""

from typing import Any

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger
from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.value_objects import PermissionKey

EXPORT_COLUMNS = (
    "name",
    "patentee",
    "country",
    "status",
    "app_number",
    "annuity_date",
)


class ExportPatentsUseCase:
    """Export patents as a list of column -> value rows."""

    def __init__(self, unit_of_work_factory: type, audit_logger: AuditLogger) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        environment: ClientEnvironment | None = None,
    ) -> list[dict[str, Any]]:
        require(context, PermissionKey.EXPORT_DATA)
        async with self._uow_factory() as uow:
            patents = await uow.patents.list_all()

        rows = []
        for p in patents:
            row = {col: getattr(p, col) for col in EXPORT_COLUMNS}
            if row["annuity_date"] is not None:
                row["annuity_date"] = row["annuity_date"].isoformat()
            rows.append(row)

        await self._audit.log_action(
            context.identity,
            "EXPORT_PATENTS",
            details={"count": len(rows)},
            environment=environment,
        )
        return rows
