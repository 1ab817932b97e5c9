"""Request helpers shared by resources."""

from datetime import date

import falcon.asgi

from patentvault.application.authorization import require
from patentvault.application.dto.patent_dto import PatentInput
from patentvault.domain.entities import AccessRule, ActionLogEntry, AuthorizationContext, Patent, Role
from patentvault.domain.exceptions import AuthenticationRequired, ValidationError


def current_session(
    req: falcon.asgi.Request, required: str | None = None
) -> AuthorizationContext:
    """Session set by AuthMiddleware; AuthenticationRequired if absent.

    With required, the permission is checked before the handler reads the
    body or path parameters.
    """
    session = getattr(req.context, "session", None)
    if session is None:
        raise AuthenticationRequired("Unauthorized")
    if required is not None:
        require(session, required)
    return session


async def json_body(req: falcon.asgi.Request) -> dict:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def rule_to_dict(rule: AccessRule) -> dict:
    return {
        "id": str(rule.id),
        "value": rule.value,
        "kind": str(rule.kind),
        "role": rule.role,
        "description": rule.description,
        "created_at": rule.created_at.isoformat(),
    }


def role_to_dict(role: Role) -> dict:
    return {
        "name": role.name,
        "permissions": sorted(role.permissions),
        "description": role.description,
        "builtin": role.is_builtin,
    }


def log_to_dict(entry: ActionLogEntry) -> dict:
    return {
        "id": str(entry.id),
        "actor": entry.actor,
        "action": entry.action,
        "target": entry.target,
        "details": entry.details,
        "created_at": entry.created_at.isoformat(),
    }


def patent_to_dict(p: Patent) -> dict:
    return {
        "id": str(p.id),
        "name": p.name,
        "patentee": p.patentee,
        "country": p.country,
        "status": p.status,
        "app_number": p.app_number,
        "annuity_date": p.annuity_date.isoformat() if p.annuity_date else None,
        "notification_emails": p.notification_emails,
        "created_at": p.created_at.isoformat(),
        "updated_at": p.updated_at.isoformat(),
    }


def patent_input(body: dict) -> PatentInput:
    """Build PatentInput from a JSON object; ValidationError on bad fields."""
    try:
        annuity = body.get("annuity_date")
        return PatentInput(
            name=str(body["name"]).strip(),
            patentee=str(body.get("patentee", "")),
            country=str(body.get("country", "")),
            status=str(body.get("status", "")),
            app_number=str(body.get("app_number", "")),
            annuity_date=date.fromisoformat(annuity) if annuity else None,
            notification_emails=body.get("notification_emails") or None,
        )
    except KeyError as e:
        raise ValidationError(f"Missing required field: {e}") from e
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e)) from e
