"""Auth middleware - attaches the session's authorization context to the request."""

import falcon.asgi
from loguru import logger

from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuthenticationProvider
from patentvault.application.use_cases.session.start_session import StartSessionUseCase
from patentvault.infrastructure.session.registry import BYPASS_KEY, SessionRegistry


def client_environment(req: falcon.asgi.Request) -> ClientEnvironment:
    """Client address (first hop of the forwarded route) and User-Agent."""
    route = req.access_route
    return ClientEnvironment(
        ip_address=route[0] if route else req.remote_addr,
        user_agent=req.user_agent,
    )


class AuthMiddleware:
    """Resolves Bearer tokens to cached sessions; starts a session on first sight.

    A cached session whose re-check time has passed is confirmed with the
    provider again; a token the provider no longer accepts loses its session.

    Sets req.context.session (AuthorizationContext or None),
    req.context.session_key and req.context.environment.
    """

    def __init__(
        self,
        registry: SessionRegistry,
        start_session: StartSessionUseCase,
        auth_provider: AuthenticationProvider | None = None,
        bypass_enabled: bool = False,
    ) -> None:
        self._registry = registry
        self._start_session = start_session
        self._auth_provider = auth_provider
        self._bypass_enabled = bypass_enabled

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.environment = client_environment(req)
        req.context.session = None
        req.context.session_key = None

        auth = req.get_header("Authorization")
        identity = None
        expires_at = None
        if auth and auth.startswith("Bearer "):
            key = auth[7:].strip()
            context = self._registry.get(key)
            if context is None:
                if self._auth_provider is None:
                    return
                verified = await self._auth_provider.verify(key)
                if verified is None:
                    if self._registry.pop(key) is not None:
                        logger.info("Ended session of a token the provider no longer accepts")
                    else:
                        logger.info("Rejected bearer token without verified email")
                    return
                identity = verified.email
                expires_at = verified.expires_at
                context = self._registry.renew(key, expires_at)
        elif self._bypass_enabled:
            key = BYPASS_KEY
            context = self._registry.renew(key)
        else:
            return

        if context is None:
            context = await self._start_session.execute(identity, req.context.environment)
            self._registry.put(key, context, expires_at)
        req.context.session = context
        req.context.session_key = key
