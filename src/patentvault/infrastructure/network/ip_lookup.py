"""Public IP lookup over HTTP."""

import httpx
from loguru import logger


class HttpIpLookup:
    """Resolves the public IP with one GET; caches the first answer.

    Accepts either a JSON body with an "ip" field or a plain-text body.
    """

    def __init__(self, url: str, timeout: float = 2.0) -> None:
        self._url = url
        self._timeout = timeout
        self._cached: str | None = None

    async def lookup(self) -> str | None:
        if self._cached:
            return self._cached
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                r = await client.get(self._url)
                r.raise_for_status()
        except httpx.HTTPError as e:
            logger.debug(f"IP lookup failed: {e}")
            return None

        ip = _extract_ip(r)
        if ip:
            self._cached = ip
        return ip


def _extract_ip(response: httpx.Response) -> str | None:
    if "json" in response.headers.get("content-type", ""):
        try:
            data = response.json()
        except ValueError:
            return None
        ip = data.get("ip") if isinstance(data, dict) else None
        return str(ip).strip() if ip else None
    text = response.text.strip()
    return text or None
