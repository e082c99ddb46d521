from __future__ import annotations

from typing import List

from postgrest.exceptions import APIError

from leetsync.common.errors import AlreadyExistsError, RepositoryError, is_unique_violation
from leetsync.db.supabase import execute, get_supabase
from .schemas import Favorite, FavoriteCreate


class FavoriteRepository:
    table = "favorites"

    async def add(self, user_id: str, problem_id: str) -> Favorite:
        client = await get_supabase()
        payload = FavoriteCreate(user_id=user_id, problem_id=problem_id).model_dump()
        try:
            resp = await execute(client.table(self.table).insert(payload), "favorites.insert")
        except APIError as e:
            if is_unique_violation(e):
                raise AlreadyExistsError("Problem already in favorites") from e
            raise
        if not resp.data:
            raise RepositoryError("Failed to create favorite")
        return Favorite.model_validate(resp.data[0])

    async def remove(self, user_id: str, problem_id: str) -> bool:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).delete().eq("user_id", user_id).eq("problem_id", problem_id),
            "favorites.delete",
        )
        return bool(resp.data)

    async def is_favorited(self, user_id: str, problem_id: str) -> bool:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("id").eq("user_id", user_id).eq("problem_id", problem_id).limit(1),
            "favorites.exists",
        )
        return bool(resp.data)

    async def list_problem_ids(self, user_id: str) -> List[str]:
        """Favorited problem ids, newest first."""
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("problem_id").eq("user_id", user_id).order("created_at", desc=True),
            "favorites.list",
        )
        return [str(row["problem_id"]) for row in resp.data or []]


favorite_repository = FavoriteRepository()
