from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from leetsync.core.config import get_settings
from .schemas import JudgeProfile, JudgeSubmission, ProblemDetail

logger = logging.getLogger(__name__)


class JudgeAPIError(RuntimeError):
    """Raised when the judge API cannot be reached or returns an unusable payload."""


class JudgeGraphQLError(JudgeAPIError):
    """HTTP 200 with a GraphQL ``errors`` array and no usable data."""

    def __init__(self, messages: List[str]) -> None:
        super().__init__(f"LeetCode GraphQL error: {messages[0]}")
        self.messages = messages


class JudgeUserNotFound(JudgeAPIError):
    def __init__(self, username: str) -> None:
        super().__init__(f"LeetCode user not found: {username}")
        self.username = username


PROFILE_QUERY = """
query getUserProfile($username: String!) {
  matchedUser(username: $username) {
    username
    submitStats: submitStatsGlobal {
      acSubmissionNum {
        difficulty
        count
      }
    }
  }
}
"""

RECENT_AC_QUERY = """
query recentAcSubmissions($username: String!, $limit: Int!) {
  recentAcSubmissionList(username: $username, limit: $limit) {
    id
    title
    titleSlug
    timestamp
    statusDisplay
    lang
  }
}
"""

PROBLEM_DETAIL_QUERY = """
query getProblemDetails($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    questionFrontendId
    title
    titleSlug
    difficulty
    topicTags {
      name
      slug
    }
  }
}
"""

SUBMISSION_DETAIL_QUERY = """
query submissionDetails($submissionId: Int!) {
  submissionDetails(submissionId: $submissionId) {
    code
  }
}
"""


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class LeetCodeClient:
    """Async GraphQL client for the handful of LeetCode queries the sync needs."""

    def __init__(self) -> None:
        self.settings = get_settings()
        self.url = self.settings.leetcode_graphql_url
        self.headers = {
            "Content-Type": "application/json",
            "User-Agent": self.settings.leetcode_user_agent,
            "Referer": "https://leetcode.com",
            "Origin": "https://leetcode.com",
        }
        self._logger = logger

    async def _request(self, payload: Dict[str, Any], cookies: Optional[Dict[str, str]] = None) -> httpx.Response:
        timeout = httpx.Timeout(connect=5.0, read=self.settings.http_timeout_s, write=5.0, pool=5.0)
        async with httpx.AsyncClient(timeout=timeout, cookies=cookies) as client:
            return await client.post(self.url, json=payload, headers=self.headers)

    async def _graphql(
        self, query: str, variables: Dict[str, Any], field: str, cookies: Optional[Dict[str, str]] = None
    ) -> Any:
        """Run one query and return ``data[field]``.

        A null field next to a non-empty ``errors`` array raises ``JudgeGraphQLError``;
        a null field without errors is returned as ``None``.
        """
        try:
            resp = await self._request({"query": query, "variables": variables}, cookies=cookies)
        except httpx.HTTPError as e:
            raise JudgeAPIError(f"LeetCode request failed: {e}") from e
        if resp.status_code >= 400:
            raise JudgeAPIError(f"LeetCode HTTP error: {resp.status_code}")
        try:
            body = resp.json()
        except ValueError as e:
            raise JudgeAPIError("LeetCode returned a non-JSON body") from e
        if not isinstance(body, dict):
            raise JudgeAPIError("LeetCode returned an unexpected payload")
        value = (body.get("data") or {}).get(field)
        if value is None:
            messages = [
                str(err.get("message") if isinstance(err, dict) else err) for err in body.get("errors") or []
            ]
            if messages:
                raise JudgeGraphQLError(messages)
        return value

    async def get_user_profile(self, username: str) -> JudgeProfile:
        try:
            user = await self._graphql(PROFILE_QUERY, {"username": username}, "matchedUser")
        except JudgeGraphQLError as e:
            if any("does not exist" in m.lower() for m in e.messages):
                raise JudgeUserNotFound(username) from e
            raise
        if not user:
            raise JudgeUserNotFound(username)
        counts: Dict[str, int] = {}
        for row in ((user.get("submitStats") or {}).get("acSubmissionNum") or []):
            counts[str(row.get("difficulty"))] = _to_int(row.get("count")) or 0
        profile = JudgeProfile(
            username=user.get("username") or username,
            total_solved=counts.get("All", 0),
            easy_solved=counts.get("Easy", 0),
            medium_solved=counts.get("Medium", 0),
            hard_solved=counts.get("Hard", 0),
        )
        self._logger.info("leetcode.profile username=%s total=%d", profile.username, profile.total_solved)
        return profile

    async def get_recent_submissions(self, username: str, limit: int) -> List[JudgeSubmission]:
        rows = await self._graphql(
            RECENT_AC_QUERY, {"username": username, "limit": limit}, "recentAcSubmissionList"
        ) or []
        submissions = [
            JudgeSubmission(
                id=str(row["id"]) if row.get("id") is not None else None,
                title=row.get("title") or "",
                slug=row.get("titleSlug") or "",
                status=row.get("statusDisplay") or "",
                language=row.get("lang"),
                timestamp_seconds=_to_int(row.get("timestamp")),
            )
            for row in rows
            if row.get("titleSlug")
        ]
        self._logger.info("leetcode.recent username=%s count=%d", username, len(submissions))
        return submissions

    async def get_problem_detail(self, slug: str) -> Optional[ProblemDetail]:
        question = await self._graphql(PROBLEM_DETAIL_QUERY, {"titleSlug": slug}, "question")
        if not question:
            return None
        return ProblemDetail(
            slug=question.get("titleSlug") or slug,
            title=question.get("title"),
            difficulty=question.get("difficulty"),
            topic_tags=[t["name"] for t in question.get("topicTags") or [] if t.get("name")],
            numeric_id=_to_int(question.get("questionFrontendId")),
        )

    async def get_submission_code(self, submission_id: str) -> Optional[str]:
        """Submitted source, available only with a configured ``LEETCODE_SESSION`` cookie."""
        session = self.settings.leetcode_session
        sid = _to_int(submission_id)
        if not session or sid is None:
            return None
        detail = await self._graphql(
            SUBMISSION_DETAIL_QUERY,
            {"submissionId": sid},
            "submissionDetails",
            cookies={"LEETCODE_SESSION": session},
        ) or {}
        return detail.get("code") or None


leetcode_client = LeetCodeClient()
