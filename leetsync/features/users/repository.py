from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel

from leetsync.common.errors import RepositoryError
from leetsync.db.supabase import execute, get_supabase
from .schemas import User, UserCreate


def _patch(fields: BaseModel) -> Dict[str, Any]:
    # Only fields the caller explicitly set; unset fields never reach the store.
    return fields.model_dump(mode="json", exclude_unset=True)


class UserRepository:
    """Supabase (PostgREST) based async repository for users."""

    table = "users"

    async def get_by_id(self, user_id: str) -> Optional[User]:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("*").eq("id", user_id).limit(1), "users.get_by_id"
        )
        return User.model_validate(resp.data[0]) if resp.data else None

    async def find_by_leetcode_username(self, username: str) -> Optional[User]:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("*").eq("leetcode_username", username).limit(1),
            "users.find_by_leetcode_username",
        )
        return User.model_validate(resp.data[0]) if resp.data else None

    async def create(self, data: UserCreate) -> User:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).insert(data.model_dump(mode="json")), "users.insert"
        )
        if not resp.data:
            raise RepositoryError("Failed to create user record")
        return User.model_validate(resp.data[0])

    async def update(self, user_id: str, fields: BaseModel) -> Optional[User]:
        """Partial update. Columns absent from ``fields`` keep their stored values."""
        payload = _patch(fields)
        if not payload:
            return await self.get_by_id(user_id)
        payload["updated_at"] = datetime.now(timezone.utc).isoformat()
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).update(payload).eq("id", user_id), "users.update"
        )
        return User.model_validate(resp.data[0]) if resp.data else None


user_repository = UserRepository()
