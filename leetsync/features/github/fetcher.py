"""GitHub repository walker producing solution entries.

Only the top level of the repository is scanned for problem folders; each
folder's direct files are read. A failure listing the repository root is
fatal, while a failure on one folder or file is logged and recorded in
``failures`` so the rest of the repository still syncs.
"""
from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Any, AsyncIterator, Dict, List, Optional
from urllib.parse import quote

import httpx

from leetsync.core.config import get_settings
from leetsync.features.solutions.duplicates import content_fingerprint
from .identity import SOURCE_EXTENSIONS, extract_numeric_id, extract_slug, file_extension, language_for_file
from .schemas import RepositoryCodeEntry

logger = logging.getLogger(__name__)

EXCLUDED_FOLDERS = frozenset(
    {
        "readme",
        "doc",
        "docs",
        "test",
        "tests",
        ".git",
        ".github",
        "node_modules",
        "vendor",
        "venv",
        ".venv",
        "__pycache__",
    }
)

_DIFFICULTY_PREFIX = re.compile(r"^(easy|medium|hard)")
_PROBLEM_HINT = re.compile(r"(leetcode|problem|solution)")
_HAS_DIGITS = re.compile(r"\d")


class GitHubAPIError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def is_problem_folder(name: str) -> bool:
    lowered = (name or "").lower()
    if lowered in EXCLUDED_FOLDERS:
        return False
    return bool(
        _HAS_DIGITS.search(lowered)
        or _DIFFICULTY_PREFIX.match(lowered)
        or _PROBLEM_HINT.search(lowered)
    )


def is_solution_file(name: str) -> bool:
    lowered = (name or "").lower()
    if "readme" in lowered or "test" in lowered:
        return False
    return file_extension(lowered) in SOURCE_EXTENSIONS


def decode_content(payload: Dict[str, Any]) -> str:
    encoding = payload.get("encoding") or "base64"
    content = payload.get("content")
    if content is None or encoding != "base64":
        raise ValueError(f"unsupported content encoding: {encoding}")
    try:
        raw = base64.b64decode(content)
    except (binascii.Error, ValueError) as e:
        raise ValueError("invalid base64 content") from e
    return raw.decode("utf-8")


class RepositoryContentFetcher:
    """Walks one repository and yields a ``RepositoryCodeEntry`` per solution file."""

    def __init__(self, token: Optional[str] = None) -> None:
        self.settings = get_settings()
        self.base_url = self.settings.github_api_url
        self.token = token or self.settings.github_token
        self.headers = {"Accept": "application/vnd.github.v3+json"}
        if self.token:
            self.headers["Authorization"] = f"token {self.token}"
        self.failures: List[str] = []
        self.folders_scanned = 0

    async def _request(self, url: str) -> httpx.Response:
        timeout = httpx.Timeout(connect=5.0, read=self.settings.http_timeout_s, write=5.0, pool=5.0)
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            return await client.get(url, headers=self.headers)

    async def _get_json(self, url: str) -> Any:
        try:
            resp = await self._request(url)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"GitHub request failed: {e}") from e
        if resp.status_code >= 400:
            raise GitHubAPIError(f"GitHub API error: {resp.status_code}", status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise GitHubAPIError("GitHub returned a non-JSON body", status_code=resp.status_code) from e

    def _contents_url(self, owner: str, repo: str, path: str = "") -> str:
        url = f"{self.base_url}/repos/{quote(owner)}/{quote(repo)}/contents"
        return f"{url}/{quote(path)}" if path else url

    async def list_problem_folders(self, owner: str, repo: str) -> List[Dict[str, Any]]:
        root = await self._get_json(self._contents_url(owner, repo))
        if not isinstance(root, list):
            raise GitHubAPIError(f"Repository root of {owner}/{repo} is not a directory listing")
        folders = [item for item in root if item.get("type") == "dir" and is_problem_folder(item.get("name", ""))]
        logger.info("github.folders repo=%s/%s candidates=%d", owner, repo, len(folders))
        return folders

    async def iter_code(self, owner: str, repo: str) -> AsyncIterator[RepositoryCodeEntry]:
        folders = await self.list_problem_folders(owner, repo)
        for folder in folders:
            name = folder.get("name", "")
            slug = extract_slug(name)
            numeric_id = extract_numeric_id(name)
            try:
                listing = await self._get_json(self._contents_url(owner, repo, folder.get("path") or name))
            except (GitHubAPIError, ValueError) as e:
                logger.warning("github.folder_failed folder=%s error=%s", name, e)
                self.failures.append(name)
                continue
            self.folders_scanned += 1
            logger.debug("github.folder folder=%s slug=%s number=%s", name, slug, numeric_id)
            files = listing if isinstance(listing, list) else []
            for item in files:
                file_name = item.get("name", "")
                if item.get("type") != "file" or not is_solution_file(file_name):
                    continue
                try:
                    payload = await self._get_json(item["url"])
                    text = decode_content(payload)
                except (GitHubAPIError, KeyError, ValueError) as e:
                    logger.warning("github.file_failed folder=%s file=%s error=%s", name, file_name, e)
                    self.failures.append(f"{name}/{file_name}")
                    continue
                yield RepositoryCodeEntry(
                    slug=slug,
                    numeric_id=numeric_id,
                    language=language_for_file(file_name),
                    code=text.strip(),
                    file_name=file_name,
                    folder_name=name,
                    content_hash=content_fingerprint(text),
                )
