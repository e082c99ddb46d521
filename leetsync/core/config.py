from __future__ import annotations

import os
from functools import lru_cache
from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(".env") or ".env"
load_dotenv(_env_path, override=False)


class Settings:
    """Central configuration (env driven)."""

    def __init__(self) -> None:
        # Supabase
        raw_url = os.getenv("SUPABASE_URL", "")
        self.supabase_url: str = raw_url.rstrip("/")
        self.supabase_key: str = os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY", "")
        self.supabase_query_timeout: float = float(os.getenv("SUPABASE_QUERY_TIMEOUT", "5"))
        # LeetCode (judge platform)
        self.leetcode_graphql_url: str = os.getenv("LEETCODE_GRAPHQL_URL", "https://leetcode.com/graphql/")
        self.leetcode_user_agent: str = os.getenv(
            "LEETCODE_USER_AGENT", "Mozilla/5.0 (compatible; leetsync/0.1)"
        )
        self.leetcode_recent_limit: int = int(os.getenv("LEETCODE_RECENT_LIMIT", "20"))
        self.leetcode_session: str | None = os.getenv("LEETCODE_SESSION") or None
        # GitHub
        self.github_api_url: str = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
        self.github_token: str | None = os.getenv("GITHUB_TOKEN") or None
        # Shared HTTP knobs
        self.http_timeout_s: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
        # App meta
        self.app_name: str = "LeetSync"
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        self.log_level: str = os.getenv("LOG_LEVEL", "DEBUG" if self.debug else "INFO").upper()
        self.allow_origins: list[str] = [
            o.strip().rstrip("/")
            for o in os.getenv("ALLOW_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
            if o.strip()
        ]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
