"""Typed records for judge (LeetCode) responses.

Raw GraphQL payloads are converted into these models inside the client and
never travel further into the pipeline.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

ACCEPTED = "Accepted"


class JudgeProfile(BaseModel):
    username: str
    total_solved: int = 0
    easy_solved: int = 0
    medium_solved: int = 0
    hard_solved: int = 0


class JudgeSubmission(BaseModel):
    id: Optional[str] = None
    title: str
    slug: str
    status: str
    language: Optional[str] = None
    timestamp_seconds: Optional[int] = None
    topic_tags: List[str] = Field(default_factory=list)
    difficulty: Optional[str] = None
    code: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == ACCEPTED

    @property
    def accepted_at(self) -> Optional[datetime]:
        if self.timestamp_seconds is None:
            return None
        return datetime.fromtimestamp(self.timestamp_seconds, tz=timezone.utc)


class ProblemDetail(BaseModel):
    slug: str
    title: Optional[str] = None
    difficulty: Optional[str] = None
    topic_tags: List[str] = Field(default_factory=list)
    numeric_id: Optional[int] = None
