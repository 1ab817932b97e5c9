"""Action log API resource."""

import falcon.asgi

from patentvault.application.use_cases.logs.list_action_logs import ListActionLogsUseCase
from patentvault.interfaces.api.resources.context import current_session, log_to_dict


class ActionLogsResource:
    """GET /v1/action-logs - most recent audit entries."""

    def __init__(self, list_logs: ListActionLogsUseCase) -> None:
        self._list = list_logs

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        entries = await self._list.execute(
            current_session(req),
            limit=req.get_param_as_int("limit") or 100,
            actor=req.get_param("actor"),
            action=req.get_param("action"),
        )
        resp.media = {"items": [log_to_dict(e) for e in entries]}
        resp.status = falcon.HTTP_200
