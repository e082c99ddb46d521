from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from leetsync.common.schemas import Row


class Topic(Row):
    id: str
    name: str
    description: Optional[str] = None
    color: str = "blue"
    icon: Optional[str] = None
    is_custom: bool = False
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None


class TopicCreate(BaseModel):
    name: str
    description: Optional[str] = None
    color: str = "blue"
    icon: Optional[str] = None
    is_custom: bool = False
    user_id: Optional[str] = None


class TopicUpdate(BaseModel):
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class TopicWithCounts(Topic):
    total_problems: int = 0
    easy: int = 0
    medium: int = 0
    hard: int = 0


class CustomTopicCreate(BaseModel):
    """Request body for a user-owned topic."""
    name: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    description: Optional[str] = None
    color: str = "blue"
    icon: Optional[str] = None
