"""Role API resources."""

import falcon.asgi

from patentvault.application.use_cases.role.create_role import CreateRoleUseCase
from patentvault.application.use_cases.role.delete_role import DeleteRoleUseCase
from patentvault.application.use_cases.role.list_roles import ListRolesUseCase
from patentvault.application.use_cases.role.rename_role import RenameRoleUseCase
from patentvault.application.use_cases.role.update_permissions import (
    UpdateRolePermissionsUseCase,
)
from patentvault.domain.exceptions import ValidationError
from patentvault.domain.value_objects import PermissionKey
from patentvault.interfaces.api.resources.context import current_session, json_body, role_to_dict


def _permissions(body: dict) -> list[str]:
    permissions = body.get("permissions", [])
    if not isinstance(permissions, list):
        raise ValidationError("'permissions' must be a list")
    return [str(p) for p in permissions]


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(self, list_roles: ListRolesUseCase, create_role: CreateRoleUseCase) -> None:
        self._list = list_roles
        self._create = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        roles = await self._list.execute(current_session(req))
        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = current_session(req, PermissionKey.MANAGE_ACCESS)
        body = await json_body(req)
        role = await self._create.execute(
            session,
            str(body.get("name", "")),
            _permissions(body),
            description=body.get("description"),
            environment=req.context.environment,
        )
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """PUT/DELETE /v1/roles/{name} - replace permissions, delete role."""

    def __init__(
        self,
        update_permissions: UpdateRolePermissionsUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self._update = update_permissions
        self._delete = delete_role

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str) -> None:
        session = current_session(req, PermissionKey.MANAGE_ACCESS)
        body = await json_body(req)
        role = await self._update.execute(
            session, name, _permissions(body), environment=req.context.environment
        )
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        await self._delete.execute(
            current_session(req), name, environment=req.context.environment
        )
        resp.status = falcon.HTTP_204


class RoleRenameResource:
    """POST /v1/roles/{name}/rename - rename role and migrate its rules."""

    def __init__(self, rename_role: RenameRoleUseCase) -> None:
        self._rename = rename_role

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str) -> None:
        session = current_session(req, PermissionKey.MANAGE_ACCESS)
        body = await json_body(req)
        if not body.get("new_name"):
            raise ValidationError("Field 'new_name' is required")
        role = await self._rename.execute(
            session, name, str(body["new_name"]), environment=req.context.environment
        )
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200
