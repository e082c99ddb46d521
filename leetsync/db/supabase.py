"""Unified async Supabase client (single entry point).

Import using: from leetsync.db.supabase import get_supabase
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional
from supabase import AsyncClient, create_async_client
from leetsync.core.config import get_settings

logger = logging.getLogger("db.supabase")

_client: Optional[AsyncClient] = None
_lock = asyncio.Lock()


async def get_supabase() -> AsyncClient:
    """Return a cached `AsyncClient` instance (lazy-created)."""
    global _client
    if _client is not None:
        return _client
    async with _lock:
        if _client is None:
            settings = get_settings()
            try:
                _client = await create_async_client(settings.supabase_url, settings.supabase_key)
            except Exception as exc:  # pragma: no cover (network/init failure)
                raise RuntimeError("Could not create Supabase async client") from exc
    return _client


async def execute(query: Any, label: str) -> Any:
    """Run a PostgREST query builder with the configured timeout, logging slow calls."""
    timeout = get_settings().supabase_query_timeout
    t0 = time.perf_counter()
    resp = await asyncio.wait_for(query.execute(), timeout=timeout)
    ms = int((time.perf_counter() - t0) * 1000)
    if ms > 50:
        logger.info("supabase.%s_ms=%d", label, ms)
    return resp


__all__ = ["get_supabase", "execute"]
