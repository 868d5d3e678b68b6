"""Session Cache — in-process TTL cache with a fixed entry cap.

Invariants:
    - len(cache) <= max_size; inserting a new key when full evicts the oldest insertion
    - Expired entries are never returned (lazy check on read, bulk removal on sweep)
    - Values are stored as given; callers store snapshots, not live aggregates

Design Decisions:
    - Clock injectable (defaults to time.monotonic) so expiry is testable without sleeping
    - No lock: accessed only from the event loop thread
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    value: Any
    stored_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    def to_dict(self) -> dict:
        total = self.hits + self.misses
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": round(self.hits / total, 4) if total else 0.0,
        }


class TTLCache:
    """Fixed-size TTL cache keyed by string."""

    def __init__(
        self, max_size: int = 1000, ttl_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self._entries: dict[str, CacheEntry] = {}
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._clock = clock
        self.stats = CacheStats()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and not entry.is_expired(self._clock())

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            self.stats.misses += 1
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            self.stats.misses += 1
            return None
        self.stats.hits += 1
        return entry.value

    def set(self, key: str, value: Any) -> None:
        now = self._clock()
        if key not in self._entries and len(self._entries) >= self._max_size:
            self._evict_oldest()
        self._entries[key] = CacheEntry(
            value=value, stored_at=now, expires_at=now + self._ttl,
        )

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def sweep(self) -> int:
        """Drop every expired entry. Returns how many were removed."""
        now = self._clock()
        expired = [k for k, e in self._entries.items() if e.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Cache sweep removed {len(expired)} expired entries")
        return len(expired)

    def _evict_oldest(self) -> None:
        oldest = min(self._entries, key=lambda k: self._entries[k].stored_at)
        del self._entries[oldest]
        self.stats.evictions += 1
