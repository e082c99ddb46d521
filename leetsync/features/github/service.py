from __future__ import annotations

import logging
from typing import Optional

from leetsync.features.users.repository import UserRepository, user_repository
from leetsync.features.users.schemas import GithubSettingsUpdate
from .schemas import GithubSettingsResponse, parse_repo_url

logger = logging.getLogger("github.settings")


async def save_github_settings(
    user_id: str,
    repo_url: str,
    token: Optional[str] = None,
    users: UserRepository = user_repository,
) -> Optional[GithubSettingsResponse]:
    """Validate and store the repository settings. Returns None for an unknown user.

    Raises ``RepositoryUrlError`` for a malformed URL. An omitted token clears the stored one.
    """
    parse_repo_url(repo_url)
    updated = await users.update(
        user_id, GithubSettingsUpdate(github_repo_url=repo_url.strip(), github_token=token or None)
    )
    if updated is None:
        return None
    logger.info("github.settings_saved user_id=%s has_token=%s", user_id, bool(updated.github_token))
    return GithubSettingsResponse(githubRepoUrl=updated.github_repo_url, hasToken=bool(updated.github_token))


async def get_github_settings(
    user_id: str, users: UserRepository = user_repository
) -> Optional[GithubSettingsResponse]:
    user = await users.get_by_id(user_id)
    if user is None:
        return None
    return GithubSettingsResponse(githubRepoUrl=user.github_repo_url, hasToken=bool(user.github_token))
