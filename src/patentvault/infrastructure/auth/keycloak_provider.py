"""Keycloak OIDC provider - verified email from an access token."""

from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError
from loguru import logger

from patentvault.application.dto.verified_token import VerifiedToken


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    email_verified: bool
    expires_at: float | None = None


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens issued after magic-link login."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    async def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None when inactive or invalid."""
        try:
            token_info = await self._keycloak.a_introspect(token)
        except KeycloakError as e:
            logger.warning(f"Token introspection failed: {e}")
            return None
        if not token_info.get("active"):
            return None
        exp = token_info.get("exp")
        return OIDCUser(
            user_id=token_info.get("sub", ""),
            email=token_info.get("email"),
            email_verified=bool(token_info.get("email_verified")),
            expires_at=float(exp) if exp is not None else None,
        )

    async def verify(self, token: str) -> VerifiedToken | None:
        """Email of the token's subject, only if the provider verified it."""
        user = await self.decode_token(token)
        if not user or not user.email or not user.email_verified:
            return None
        return VerifiedToken(email=user.email, expires_at=user.expires_at)
