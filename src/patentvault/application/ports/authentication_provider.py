"""Authentication provider port - verified email from a bearer token."""

from typing import Protocol

from patentvault.application.dto.verified_token import VerifiedToken


class AuthenticationProvider(Protocol):
    """Port for resolving a session token to a verified email.

    Returns None for inactive, revoked or unverified tokens.
    """

    async def verify(self, token: str) -> VerifiedToken | None: ...
