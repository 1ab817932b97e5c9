"""Session API resource."""

import falcon.asgi

from patentvault.application.authorization import guard
from patentvault.application.use_cases.session.end_session import EndSessionUseCase
from patentvault.domain.value_objects import PermissionKey
from patentvault.infrastructure.session.registry import SessionRegistry
from patentvault.interfaces.api.resources.context import current_session

# Client control -> permission key that makes it visible.
CONTROLS = {
    "dashboard": PermissionKey.VIEW_DASHBOARD,
    "patent-list": PermissionKey.VIEW_LIST,
    "edit-patent": PermissionKey.EDIT_PATENT,
    "delete-patent": PermissionKey.DELETE_PATENT,
    "send-email": PermissionKey.SEND_EMAIL,
    "import": PermissionKey.IMPORT_DATA,
    "export": PermissionKey.EXPORT_DATA,
    "access-control": PermissionKey.MANAGE_ACCESS,
    "action-log": PermissionKey.VIEW_LOGS,
    "assistant": PermissionKey.AI_CHAT,
}


class SessionResource:
    """GET/DELETE /v1/session - current session and logout."""

    def __init__(self, end_session: EndSessionUseCase, registry: SessionRegistry) -> None:
        self._end_session = end_session
        self._registry = registry

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Resolved identity, role, permissions and visible controls."""
        session = current_session(req)
        controls = [
            c for c in (guard(session, key, name) for name, key in CONTROLS.items()) if c
        ]
        resp.media = {
            "identity": session.identity,
            "canonical_identity": session.canonical_identity,
            "role": session.effective_role,
            "permissions": sorted(session.granted_permissions),
            "controls": controls,
            "bypass": session.bypass,
            "started_at": session.started_at.isoformat(),
        }
        resp.status = falcon.HTTP_200

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Logout - forget the cached context."""
        session = current_session(req)
        await self._end_session.execute(session, req.context.environment)
        self._registry.pop(req.context.session_key)
        resp.status = falcon.HTTP_204
