from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from leetsync.features.leetcode.client import JudgeAPIError, JudgeUserNotFound
from leetsync.features.topics.categorizer import TopicConfigurationError
from .schemas import SyncReport, SyncRequest
from .service import sync_service

logger = logging.getLogger("sync.endpoints")

router = APIRouter(prefix="/sync", tags=["sync"])


@router.post("", response_model=SyncReport)
async def run_sync(body: SyncRequest) -> SyncReport:
    """Pull recent LeetCode activity (and repository code, if configured) for a user."""
    try:
        return await sync_service.sync_user(body.username.strip())
    except JudgeUserNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="LeetCode user not found") from e
    except JudgeAPIError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
    except TopicConfigurationError as e:
        logger.error("sync.misconfigured error=%s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
