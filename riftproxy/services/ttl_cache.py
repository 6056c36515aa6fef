# services/ttl_cache.py – cache mémoire à TTL devant les appels Riot

"""In-memory TTL cache guarded by a single asyncio lock.

The lock only covers dictionary access: ``fetch`` runs outside of it, so a
slow upstream call for one key never blocks readers of another key. Two
concurrent misses on the same key both call ``fetch`` and the last write
wins.

Entries stored without a TTL are never served: the next read drops them
and fetches again.

Nothing evicts entries in the background; an expired entry stays in memory
until the same key is read again (or ``invalidate``/``clear`` is called).
"""

from __future__ import annotations

import asyncio
import copy
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class CacheEntry:
    value: Any
    inserted_at: float
    ttl: Optional[float] = None  # None = toujours périmée

    def is_fresh(self, now: float) -> bool:
        return self.ttl is not None and now - self.inserted_at < self.ttl


class TTLCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._store: Dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._hits = 0
        self._misses = 0

    async def _lookup(self, key: str) -> tuple[bool, Any]:
        """Return ``(True, copy_of_value)`` on a fresh hit, ``(False, None)`` otherwise."""
        async with self._lock:
            entry = self._store.get(key)
            if entry is not None:
                if entry.ttl is None:
                    del self._store[key]
                    log.debug("Cache entry without TTL dropped: %s", key)
                elif entry.is_fresh(self._clock()):
                    self._hits += 1
                    log.debug("Cache hit: %s", key)
                    return True, copy.deepcopy(entry.value)
                else:
                    log.debug("Cache expired: %s", key)
            self._misses += 1
            return False, None

    async def get(self, key: str) -> Any:
        """Fresh value for *key* or ``None``."""
        _, value = await self._lookup(key)
        return value

    async def set(self, key: str, value: Any, ttl: Optional[float]) -> None:
        async with self._lock:
            self._store[key] = CacheEntry(copy.deepcopy(value), self._clock(), ttl)

    async def get_or_fetch(
        self,
        key: str,
        ttl: Optional[float],
        fetch: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Return the cached value for *key* or await ``fetch()`` and store it.

        Args:
            key: cache key (endpoint + parameters)
            ttl: lifetime in seconds; ``None`` stores an entry that is never served
            fetch: coroutine factory called on a miss, outside the lock

        Errors raised by ``fetch`` propagate unchanged and nothing is stored.
        """
        hit, value = await self._lookup(key)
        if hit:
            return value

        value = await fetch()
        await self.set(key, value, ttl)
        return value

    async def invalidate(self, key: str) -> bool:
        async with self._lock:
            return self._store.pop(key, None) is not None

    async def clear(self) -> None:
        async with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
        log.info("Cache cleared (%d entries)", count)

    def entry(self, key: str) -> Optional[CacheEntry]:
        """Raw entry for *key*, expired or not (introspection only)."""
        return self._store.get(key)

    def stats(self) -> Dict[str, int]:
        return {"size": len(self._store), "hits": self._hits, "misses": self._misses}

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store
