"""Process-local read cache for rarely changing rows (the seeded topic list).

Entries expire after ``READ_CACHE_SECONDS``; writers invalidate by key prefix.
``READ_CACHE_DISABLED=true`` turns every lookup into a miss.
"""
from __future__ import annotations

import os
import time
from typing import Any, Callable, Dict, Optional, Tuple


class ReadCache:
    def __init__(self, ttl_s: int = 60, enabled: bool = True, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_s = max(1, int(ttl_s))
        self.enabled = enabled
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        if not self.enabled:
            return None
        hit = self._entries.get(key)
        if hit is None:
            return None
        value, expires_at = hit
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def put(self, key: str, value: Any, ttl_s: Optional[int] = None) -> None:
        if not self.enabled:
            return
        ttl = self.ttl_s if ttl_s is None else max(1, int(ttl_s))
        self._entries[key] = (value, self._clock() + ttl)

    def invalidate(self, prefix: Optional[str] = None) -> None:
        if prefix is None:
            self._entries.clear()
            return
        for key in [k for k in self._entries if k.startswith(prefix)]:
            del self._entries[key]


read_cache = ReadCache(
    ttl_s=int(os.getenv("READ_CACHE_SECONDS", "60")),
    enabled=os.getenv("READ_CACHE_DISABLED", "false").lower() != "true",
)
