from __future__ import annotations

from typing import List, Optional

from leetsync.common.errors import RepositoryError
from leetsync.db.supabase import execute, get_supabase
from .schemas import Problem, ProblemCreate


class ProblemRepository:
    table = "problems"

    async def get(self, problem_id: str) -> Optional[Problem]:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("*").eq("id", problem_id).limit(1), "problems.get"
        )
        return Problem.model_validate(resp.data[0]) if resp.data else None

    async def list_by_user(self, user_id: str) -> List[Problem]:
        client = await get_supabase()
        resp = await execute(
            client.table(self.table).select("*").eq("user_id", user_id).order("created_at", desc=True),
            "problems.list_by_user",
        )
        return [Problem.model_validate(row) for row in resp.data or []]

    async def find_by_slug(self, slug: str, user_id: Optional[str] = None) -> Optional[Problem]:
        client = await get_supabase()
        query = client.table(self.table).select("*").eq("slug", slug)
        if user_id:
            query = query.eq("user_id", user_id)
        resp = await execute(query.limit(1), "problems.find_by_slug")
        return Problem.model_validate(resp.data[0]) if resp.data else None

    async def find_by_numeric_id(self, numeric_id: int, user_id: Optional[str] = None) -> Optional[Problem]:
        client = await get_supabase()
        query = client.table(self.table).select("*").eq("numeric_id", numeric_id)
        if user_id:
            query = query.eq("user_id", user_id)
        resp = await execute(query.limit(1), "problems.find_by_numeric_id")
        return Problem.model_validate(resp.data[0]) if resp.data else None

    async def create(self, data: ProblemCreate) -> Problem:
        client = await get_supabase()
        resp = await execute(client.table(self.table).insert(data.model_dump(mode="json")), "problems.insert")
        if not resp.data:
            raise RepositoryError("Failed to create problem")
        return Problem.model_validate(resp.data[0])


problem_repository = ProblemRepository()
