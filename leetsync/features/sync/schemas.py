"""Sync report returned to the caller; serialised with camelCase keys."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

NO_REPOSITORY_MESSAGE = "No GitHub repository configured. Please set up your GitHub repo URL in Settings."


class GithubSyncReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_solutions: int = Field(0, alias="totalSolutions")
    processed: int = 0
    created: int = 0
    updated: int = 0
    skipped: int = 0
    error: Optional[str] = None
    message: Optional[str] = None


class SyncReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    message: str = "Data fetched successfully"
    total_submissions: int = Field(0, alias="totalSubmissions")
    problems_processed: int = Field(0, alias="problemsProcessed")
    problems_skipped: int = Field(0, alias="problemsSkipped")
    github_sync: Optional[GithubSyncReport] = Field(None, alias="githubSync")


class SyncRequest(BaseModel):
    username: str = Field(..., min_length=1)
