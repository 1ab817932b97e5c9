"""Assistant API resource."""

import falcon.asgi

from patentvault.application.use_cases.assistant.ask_assistant import AskAssistantUseCase
from patentvault.domain.value_objects import PermissionKey
from patentvault.interfaces.api.resources.context import current_session, json_body


class AssistantResource:
    """POST /v1/assistant - ask the AI assistant."""

    def __init__(self, ask_assistant: AskAssistantUseCase) -> None:
        self._ask = ask_assistant

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = current_session(req, PermissionKey.AI_CHAT)
        body = await json_body(req)
        reply = await self._ask.execute(
            session,
            str(body.get("prompt", "")),
            patent_context=body.get("context"),
            environment=req.context.environment,
        )
        resp.media = {"reply": reply}
        resp.status = falcon.HTTP_200
