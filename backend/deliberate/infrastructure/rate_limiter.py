"""Rate Limiter — advisory fixed-window limits per identifier, backed by `limits`.

Invariants:
    - Three independent windows: global, per session, and analysis tools per session
    - check() either records one hit in every applicable window or raises RateLimitedError
    - RateLimitedError.retry_after_ms >= 0 (time until the exhausted window resets)
    - Advisory only: no queuing or backpressure

Design Decisions:
    - `limits` FixedWindowRateLimiter over MemoryStorage: the same engine slowapi uses,
      applied per session id inside tool dispatch instead of per HTTP route
    - Window expiry is handled by the storage; reset() exists for tests and admin use
"""

import logging
import time
from dataclasses import dataclass

from limits import RateLimitItem, RateLimitItemPerSecond
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter

from deliberate.core.errors import RateLimitedError

logger = logging.getLogger(__name__)

GLOBAL_KEY = "global"


@dataclass(frozen=True)
class RateLimitPolicy:
    global_max: int = 100
    global_window_seconds: int = 60
    session_max: int = 30
    session_window_seconds: int = 60
    analysis_max: int = 10
    analysis_window_seconds: int = 300


class RateLimiter:
    """Per-identifier fixed-window counters."""

    def __init__(self, policy: RateLimitPolicy | None = None):
        self.policy = policy or RateLimitPolicy()
        self._storage = MemoryStorage()
        self._limiter = FixedWindowRateLimiter(self._storage)
        self._global = RateLimitItemPerSecond(
            self.policy.global_max, self.policy.global_window_seconds,
        )
        self._session = RateLimitItemPerSecond(
            self.policy.session_max, self.policy.session_window_seconds,
        )
        self._analysis = RateLimitItemPerSecond(
            self.policy.analysis_max, self.policy.analysis_window_seconds,
        )

    def _windows(
        self, session_id: str | None, is_analysis: bool,
    ) -> list[tuple[RateLimitItem, str]]:
        windows = [(self._global, GLOBAL_KEY)]
        if session_id:
            windows.append((self._session, f"session:{session_id}"))
            if is_analysis:
                windows.append((self._analysis, f"analysis:{session_id}"))
        return windows

    def _retry_after_ms(self, item: RateLimitItem, identifier: str) -> int:
        stats = self._limiter.get_window_stats(item, identifier)
        return max(0, int((stats.reset_time - time.time()) * 1000))

    def check(self, session_id: str | None = None, is_analysis: bool = False) -> None:
        """Record a call, or raise RateLimitedError if any window is exhausted."""
        windows = self._windows(session_id, is_analysis)
        for item, identifier in windows:
            if not self._limiter.test(item, identifier):
                retry_after_ms = self._retry_after_ms(item, identifier)
                logger.warning(
                    f"Rate limit exceeded for {identifier}",
                    extra={"session_id": session_id, "error_code": "RATE_LIMITED"},
                )
                raise RateLimitedError(identifier, retry_after_ms)
        for item, identifier in windows:
            self._limiter.hit(item, identifier)

    def remaining(self, session_id: str | None = None) -> dict:
        result = {
            GLOBAL_KEY: self._limiter.get_window_stats(self._global, GLOBAL_KEY).remaining,
        }
        if session_id:
            key = f"session:{session_id}"
            result["session"] = self._limiter.get_window_stats(self._session, key).remaining
        return result

    def reset(self) -> None:
        self._storage.reset()
