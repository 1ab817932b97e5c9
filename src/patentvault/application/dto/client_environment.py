"""Client environment DTO - request metadata for audit enrichment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientEnvironment:
    """Where a request came from."""

    ip_address: str | None = None
    user_agent: str | None = None
