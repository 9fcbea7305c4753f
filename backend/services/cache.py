"""Simple in-memory TTL cache for FotMob responses.

Note: state is per process. Serverless hosts may recycle the instance between
invocations, in which case the next call starts cold. Warm reuse is an
optimization, never something callers can count on.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable

# FotMob league tables and match details change at roughly the same cadence.
CACHE_TTL_SECONDS = 300


@dataclass
class CacheEntry:
    key: str
    value: Any
    stored_at: float


class TTLCache:
    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for key, or None if absent or expired.

        Expired entries stay in place until the next set() overwrites them.
        """
        entry = self._store.get(key)
        if entry is not None and self._clock() - entry.stored_at < self.ttl_seconds:
            return entry
        return None

    def set(self, key: str, value: Any) -> CacheEntry:
        entry = CacheEntry(key=key, value=value, stored_at=self._clock())
        self._store[key] = entry
        return entry

    def __len__(self) -> int:
        return len(self._store)
