"""Session registry - authorization contexts keyed by session token."""

import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass

from patentvault.domain.entities import AuthorizationContext

BYPASS_KEY = "__bypass__"


@dataclass
class _Entry:
    context: AuthorizationContext
    valid_until: float | None


class SessionRegistry:
    """In-memory LRU map of session token to AuthorizationContext.

    A context is stored at login and dropped at logout; it is never
    recomputed in between. Each entry is trusted until the earlier of the
    token's expiry and ttl_seconds after it was stored or renewed. After
    that get() misses, so the token is checked with the provider again;
    renew() keeps the stored context when the token still holds.
    """

    def __init__(
        self,
        max_sessions: int = 1024,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._max = max_sessions
        self._ttl = ttl_seconds
        self._clock = clock
        self._sessions: OrderedDict[str, _Entry] = OrderedDict()

    def get(self, token: str) -> AuthorizationContext | None:
        """Context for token, or None when absent or due for re-checking."""
        entry = self._sessions.get(token)
        if entry is None:
            return None
        if entry.valid_until is not None and self._clock() >= entry.valid_until:
            return None
        self._sessions.move_to_end(token)
        return entry.context

    def put(
        self, token: str, context: AuthorizationContext, expires_at: float | None = None
    ) -> None:
        self._sessions[token] = _Entry(context, self._valid_until(expires_at))
        self._sessions.move_to_end(token)
        while len(self._sessions) > self._max:
            self._sessions.popitem(last=False)

    def renew(self, token: str, expires_at: float | None = None) -> AuthorizationContext | None:
        """Extend a stored session, fresh or not; None if token is unknown."""
        entry = self._sessions.get(token)
        if entry is None:
            return None
        entry.valid_until = self._valid_until(expires_at)
        self._sessions.move_to_end(token)
        return entry.context

    def pop(self, token: str) -> AuthorizationContext | None:
        entry = self._sessions.pop(token, None)
        return entry.context if entry else None

    def _valid_until(self, expires_at: float | None) -> float | None:
        limits = [expires_at] if expires_at is not None else []
        if self._ttl is not None:
            limits.append(self._clock() + self._ttl)
        return min(limits) if limits else None

    def __len__(self) -> int:
        return len(self._sessions)
