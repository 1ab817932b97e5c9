"""Access rule API resources."""

from dataclasses import asdict
from uuid import UUID

import falcon.asgi

from patentvault.application.use_cases.access.create_rule import CreateAccessRuleUseCase
from patentvault.application.use_cases.access.delete_rule import DeleteAccessRuleUseCase
from patentvault.application.use_cases.access.list_rules import ListAccessRulesUseCase
from patentvault.application.use_cases.access.replace_rules import ReplaceAccessRulesUseCase
from patentvault.domain.exceptions import ValidationError
from patentvault.domain.value_objects import PermissionKey, RuleKind
from patentvault.interfaces.api.resources.context import current_session, json_body, rule_to_dict


def _kind(raw) -> RuleKind:
    try:
        return RuleKind(str(raw or "EMAIL").upper())
    except ValueError as e:
        raise ValidationError(f"Invalid rule kind: {raw}") from e


class AccessRulesResource:
    """GET/POST /v1/access-rules - list (optionally grouped) and create rules."""

    def __init__(
        self,
        list_rules: ListAccessRulesUseCase,
        create_rule: CreateAccessRuleUseCase,
    ) -> None:
        self._list = list_rules
        self._create = create_rule

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = current_session(req)
        if req.get_param_as_bool("grouped"):
            groups = await self._list.grouped(session)
            items = [{**asdict(g), "kind": str(g.kind)} for g in groups]
        else:
            items = [rule_to_dict(r) for r in await self._list.execute(session)]
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create rule; the response lists the rule and its mirror, if any."""
        session = current_session(req, PermissionKey.MANAGE_ACCESS)
        body = await json_body(req)
        if not body.get("value") or not body.get("role"):
            raise ValidationError("Fields 'value' and 'role' are required")
        rules = await self._create.execute(
            session,
            body["value"],
            _kind(body.get("kind")),
            body["role"],
            description=body.get("description"),
            environment=req.context.environment,
        )
        resp.media = {"items": [rule_to_dict(r) for r in rules]}
        resp.status = falcon.HTTP_201


class AccessRuleValueResource:
    """PUT /v1/access-rules/values/{value} - replace the roles of a value."""

    def __init__(self, replace_rules: ReplaceAccessRulesUseCase) -> None:
        self._replace = replace_rules

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, value: str
    ) -> None:
        session = current_session(req, PermissionKey.MANAGE_ACCESS)
        body = await json_body(req)
        roles = body.get("roles", [])
        if not isinstance(roles, list):
            raise ValidationError("'roles' must be a list")
        rules = await self._replace.execute(
            session,
            value,
            _kind(body.get("kind")),
            [str(r) for r in roles],
            description=body.get("description"),
            environment=req.context.environment,
        )
        resp.media = {"items": [rule_to_dict(r) for r in rules]}
        resp.status = falcon.HTTP_200


class AccessRuleResource:
    """DELETE /v1/access-rules/{rule_id} - delete rule and its mirror."""

    def __init__(self, delete_rule: DeleteAccessRuleUseCase) -> None:
        self._delete = delete_rule

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, rule_id: str
    ) -> None:
        session = current_session(req, PermissionKey.MANAGE_ACCESS)
        try:
            rid = UUID(rule_id)
        except ValueError as e:
            raise ValidationError("Invalid rule ID") from e
        await self._delete.execute(session, rid, environment=req.context.environment)
        resp.status = falcon.HTTP_204
