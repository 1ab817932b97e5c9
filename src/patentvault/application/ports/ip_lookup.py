"""Public IP lookup port."""

from typing import Protocol


class IpLookup(Protocol):
    """Port for best-effort public IP resolution."""

    async def lookup(self) -> str | None: ...
