"""Pydantic models for local user records."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from leetsync.common.schemas import Row


class User(Row):
    id: str
    username: str
    leetcode_username: Optional[str] = None
    total_solved: int = 0
    easy_solved: int = 0
    medium_solved: int = 0
    hard_solved: int = 0
    last_fetched_at: Optional[datetime] = None
    github_repo_url: Optional[str] = None
    github_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserCreate(BaseModel):
    username: str
    leetcode_username: Optional[str] = None
    total_solved: int = 0
    easy_solved: int = 0
    medium_solved: int = 0
    hard_solved: int = 0
    last_fetched_at: Optional[datetime] = None


class UserStatsUpdate(BaseModel):
    """Stats written by a sync. Carries no repository fields, so a patch cannot clear them."""
    leetcode_username: str
    total_solved: int
    easy_solved: int
    medium_solved: int
    hard_solved: int
    last_fetched_at: datetime


class GithubSettingsUpdate(BaseModel):
    github_repo_url: str
    github_token: Optional[str] = None
