"""Verified token DTO - what the authentication provider vouches for."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VerifiedToken:
    """Verified email of an active token and its expiry (epoch seconds)."""

    email: str
    expires_at: float | None = None
