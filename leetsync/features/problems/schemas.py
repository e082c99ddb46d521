from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from leetsync.common.schemas import Row


class Problem(Row):
    id: str
    numeric_id: Optional[int] = None
    title: str
    slug: str
    difficulty: str
    tags: List[str] = Field(default_factory=list)
    topic_id: Optional[str] = None
    user_id: Optional[str] = None
    language: Optional[str] = None
    submission_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class ProblemCreate(BaseModel):
    numeric_id: Optional[int] = None
    title: str
    slug: str
    difficulty: str
    tags: List[str] = Field(default_factory=list)
    topic_id: Optional[str] = None
    user_id: str
    language: Optional[str] = None
    submission_date: Optional[datetime] = None
