"""Domain exception to HTTP response mapping."""

import falcon
import falcon.asgi
from loguru import logger

from patentvault.domain.exceptions import (
    AuthenticationRequired,
    DuplicateRoleError,
    NotFound,
    PatentVaultError,
    PermissionDenied,
    ProtectedRoleError,
    RenameMigrationFailure,
    RoleInUseError,
    ValidationError,
)

_STATUS = {
    AuthenticationRequired: falcon.HTTP_401,
    PermissionDenied: falcon.HTTP_403,
    NotFound: falcon.HTTP_404,
    ValidationError: falcon.HTTP_400,
    DuplicateRoleError: falcon.HTTP_409,
    ProtectedRoleError: falcon.HTTP_409,
    RoleInUseError: falcon.HTTP_409,
    RenameMigrationFailure: falcon.HTTP_500,
}


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: PatentVaultError, params
) -> None:
    """Render a domain error as {"error", "message"} with its status."""
    status = next(
        (s for cls, s in _STATUS.items() if isinstance(ex, cls)), falcon.HTTP_500
    )
    if status == falcon.HTTP_500:
        logger.error(f"{req.method} {req.path} failed: {ex}")
    resp.status = status
    resp.media = {"error": type(ex).__name__, "message": str(ex)}


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    logger.opt(exception=ex).error(f"Unhandled error on {req.method} {req.path}")
    resp.status = falcon.HTTP_500
    resp.media = {"error": "InternalServerError", "message": "Internal server error"}
