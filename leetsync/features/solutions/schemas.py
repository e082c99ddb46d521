from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from leetsync.common.schemas import Row

GITHUB_IMPORT_APPROACH = "GitHub Import"
SUBMISSION_APPROACH = "LeetCode Submission"
UNKNOWN_COMPLEXITY = "O(?)"


class Solution(Row):
    id: str
    problem_id: str
    user_id: Optional[str] = None
    name: str
    approach: str
    language: str
    code: str
    time_complexity: str = UNKNOWN_COMPLEXITY
    space_complexity: str = UNKNOWN_COMPLEXITY
    explanation: str = ""
    notes: str = ""
    is_from_github: bool = False
    github_file_name: Optional[str] = None
    github_folder_name: Optional[str] = None
    content_hash: Optional[str] = None
    submission_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class SolutionCreate(BaseModel):
    problem_id: str
    user_id: Optional[str] = None
    name: str
    approach: str
    language: str
    code: str
    time_complexity: str = UNKNOWN_COMPLEXITY
    space_complexity: str = UNKNOWN_COMPLEXITY
    explanation: str = ""
    notes: str = ""
    is_from_github: bool = False
    github_file_name: Optional[str] = None
    github_folder_name: Optional[str] = None
    content_hash: Optional[str] = None
    submission_date: Optional[datetime] = None


def solution_name(existing_count: int) -> str:
    return f"Solution-{existing_count + 1}"
