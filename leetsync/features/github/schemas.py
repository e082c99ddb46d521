from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel

_REPO_URL = re.compile(r"github\.com/([^/]+)/([^/?#]+)")


class RepositoryUrlError(ValueError):
    """Raised for a repository URL without a ``github.com/<owner>/<repo>`` part."""


class RepositoryRef(BaseModel):
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_repo_url(url: str) -> RepositoryRef:
    match = _REPO_URL.search((url or "").strip())
    if not match:
        raise RepositoryUrlError(f"Invalid GitHub repository URL: {url!r}")
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not repo:
        raise RepositoryUrlError(f"Invalid GitHub repository URL: {url!r}")
    return RepositoryRef(owner=owner, repo=repo)


class RepositoryCodeEntry(BaseModel):
    """One source file pulled from a problem folder. Lives only for the duration of a sync."""
    slug: str
    numeric_id: Optional[int] = None
    language: str
    code: str
    file_name: str
    folder_name: str
    content_hash: str


class GithubSettingsResponse(BaseModel):
    githubRepoUrl: Optional[str] = None
    hasToken: bool = False
