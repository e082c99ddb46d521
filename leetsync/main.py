"""FastAPI entry point. Lean."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from leetsync.core.config import get_settings
from leetsync.features.favorites.endpoints import router as favorites_router
from leetsync.features.github.endpoints import router as github_router
from leetsync.features.sync.endpoints import router as sync_router
from leetsync.features.topics.endpoints import router as topics_router

_settings = get_settings()
logging.basicConfig(level=_settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

app = FastAPI(title=_settings.app_name)
_START_TIME = datetime.now(timezone.utc)


# ------------------------
# CORS Setup
# ------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    from time import perf_counter

    t0 = perf_counter()
    resp = await call_next(request)
    dt = int((perf_counter() - t0) * 1000)
    logging.getLogger("request").info("%s %s %dms %d", request.method, request.url.path, dt, resp.status_code)
    return resp


# ------------------------
# Routers
# ------------------------
app.include_router(sync_router)
app.include_router(topics_router)
app.include_router(github_router)
app.include_router(favorites_router)


# ------------------------
# Meta endpoints
# ------------------------
@app.get("/", tags=["meta"], summary="API Root")
async def root():
    return {"name": _settings.app_name, "status": "ok", "docs": "/docs", "health": "/health"}


@app.get("/health", tags=["meta"], summary="Liveness probe")
async def health() -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    return {
        "status": "ok",
        "time_utc": now.isoformat(),
        "uptime_seconds": round((now - _START_TIME).total_seconds(), 2),
        "version": os.getenv("APP_VERSION", "dev"),
        "environment": "debug" if _settings.debug else "prod",
        "components": {
            "database": "configured" if _settings.supabase_url else "missing-config",
            "github_token": "configured" if _settings.github_token else "anonymous",
            "leetcode_session": "configured" if _settings.leetcode_session else "missing-config",
        },
    }
