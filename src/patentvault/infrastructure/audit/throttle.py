"""Action throttle - suppresses repeated (actor, action) pairs within a window."""

import time
from collections import OrderedDict
from collections.abc import Callable


class ActionThrottle:
    """Bounded map of (actor, action) -> last recorded time.

    Keys are kept in recording order, so expired keys sit at the front and
    are swept on every check. Above max_keys the oldest keys are evicted.
    """

    def __init__(
        self,
        window_seconds: float = 2.0,
        max_keys: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_keys < 1:
            raise ValueError("max_keys must be positive")
        self._window = window_seconds
        self._max_keys = max_keys
        self._clock = clock
        self._last: OrderedDict[tuple[str, str], float] = OrderedDict()

    def should_record(self, actor: str, action: str) -> bool:
        """True and marks the pair as recorded, unless seen within the window."""
        now = self._clock()
        self._sweep(now)
        key = (actor, action)
        last = self._last.get(key)
        if last is not None and now - last < self._window:
            return False
        self._last[key] = now
        self._last.move_to_end(key)
        while len(self._last) > self._max_keys:
            self._last.popitem(last=False)
        return True

    def _sweep(self, now: float) -> None:
        while self._last:
            key, ts = next(iter(self._last.items()))
            if now - ts < self._window:
                break
            del self._last[key]

    def __len__(self) -> int:
        return len(self._last)
