from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from .schemas import GithubSettingsResponse, RepositoryUrlError
from .service import get_github_settings, save_github_settings

router = APIRouter(prefix="/users", tags=["github"])


class GithubSettingsRequest(BaseModel):
    githubRepoUrl: str
    githubToken: Optional[str] = None


@router.put("/{user_id}/github-settings", response_model=GithubSettingsResponse)
async def put_github_settings(user_id: str, body: GithubSettingsRequest) -> GithubSettingsResponse:
    try:
        saved = await save_github_settings(user_id, body.githubRepoUrl, body.githubToken)
    except RepositoryUrlError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if saved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return saved


@router.get("/{user_id}/github-settings", response_model=GithubSettingsResponse)
async def read_github_settings(user_id: str) -> GithubSettingsResponse:
    settings = await get_github_settings(user_id)
    if settings is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return settings
