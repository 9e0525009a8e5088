"""In-memory TTL cache for scrape results, keyed by validated keyword."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from time import monotonic
from typing import Any, Callable

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 300


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: Any
    expires_at: float


class ResultCache:
    """TTL cache with lazy eviction on read.

    There is no background sweep: an expired entry stays in memory until the
    next ``get`` for its key. ``max_entries`` (0 = unbounded) optionally caps
    the number of keys, dropping the oldest insert first.
    """

    def __init__(
        self,
        ttl: float = CACHE_TTL_SECONDS,
        *,
        max_entries: int = 0,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.ttl = ttl
        self.max_entries = max_entries
        self._clock = clock
        self._store: OrderedDict[str, CacheEntry] = OrderedDict()

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._store.pop(key, None)
            logger.debug("Cache entry expired: %s", key)
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        # Replace, never mutate: a refreshed key moves to the newest slot
        self._store.pop(key, None)
        self._store[key] = CacheEntry(key, value, self._clock() + self.ttl)
        if self.max_entries > 0:
            while len(self._store) > self.max_entries:
                oldest, _ = self._store.popitem(last=False)
                logger.debug("Cache full, evicted %s", oldest)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
