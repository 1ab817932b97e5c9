"""Patent API resources - every handler goes through a gated use case."""

from uuid import UUID

import falcon.asgi

from patentvault.application.use_cases.patent.dashboard_summary import DashboardSummaryUseCase
from patentvault.application.use_cases.patent.delete_patent import DeletePatentUseCase
from patentvault.application.use_cases.patent.export_patents import ExportPatentsUseCase
from patentvault.application.use_cases.patent.import_patents import ImportPatentsUseCase
from patentvault.application.use_cases.patent.list_patents import ListPatentsUseCase
from patentvault.application.use_cases.patent.send_notification import SendNotificationUseCase
from patentvault.application.use_cases.patent.update_patent import UpdatePatentUseCase
from patentvault.domain.exceptions import ValidationError
from patentvault.domain.value_objects import PermissionKey
from patentvault.interfaces.api.resources.context import (
    current_session,
    json_body,
    patent_input,
    patent_to_dict,
)


def _patent_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError as e:
        raise ValidationError("Invalid patent ID") from e


class PatentsResource:
    """GET/POST /v1/patents - list and import; /summary and /export suffixes."""

    def __init__(
        self,
        list_patents: ListPatentsUseCase,
        import_patents: ImportPatentsUseCase,
        summary: DashboardSummaryUseCase,
        export_patents: ExportPatentsUseCase,
    ) -> None:
        self._list = list_patents
        self._import = import_patents
        self._summary = summary
        self._export = export_patents

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        patents = await self._list.execute(current_session(req))
        resp.media = {"items": [patent_to_dict(p) for p in patents]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Import rows already parsed by the client: {"items": [...]}."""
        session = current_session(req, PermissionKey.IMPORT_DATA)
        body = await json_body(req)
        items = body.get("items")
        if not isinstance(items, list):
            raise ValidationError("'items' must be a list")
        patents = await self._import.execute(
            session,
            [patent_input(i if isinstance(i, dict) else {}) for i in items],
            environment=req.context.environment,
        )
        resp.media = {"items": [patent_to_dict(p) for p in patents]}
        resp.status = falcon.HTTP_201

    async def on_get_summary(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = await self._summary.execute(current_session(req))
        resp.status = falcon.HTTP_200

    async def on_get_export(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        rows = await self._export.execute(
            current_session(req), environment=req.context.environment
        )
        resp.media = {"items": rows}
        resp.status = falcon.HTTP_200


class PatentResource:
    """PUT/DELETE /v1/patents/{patent_id}; POST .../notify."""

    def __init__(
        self,
        update_patent: UpdatePatentUseCase,
        delete_patent: DeletePatentUseCase,
        send_notification: SendNotificationUseCase,
    ) -> None:
        self._update = update_patent
        self._delete = delete_patent
        self._notify = send_notification

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, patent_id: str
    ) -> None:
        session = current_session(req, PermissionKey.EDIT_PATENT)
        body = await json_body(req)
        patent = await self._update.execute(
            session,
            _patent_id(patent_id),
            patent_input(body),
            environment=req.context.environment,
        )
        resp.media = patent_to_dict(patent)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, patent_id: str
    ) -> None:
        await self._delete.execute(
            current_session(req, PermissionKey.DELETE_PATENT),
            _patent_id(patent_id),
            environment=req.context.environment,
        )
        resp.status = falcon.HTTP_204

    async def on_post_notify(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, patent_id: str
    ) -> None:
        session = current_session(req, PermissionKey.SEND_EMAIL)
        body = await json_body(req)
        recipients = await self._notify.execute(
            session,
            _patent_id(patent_id),
            str(body.get("subject", "")),
            str(body.get("body", "")),
            environment=req.context.environment,
        )
        resp.media = {"recipients": recipients}
        resp.status = falcon.HTTP_200
