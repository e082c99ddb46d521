from __future__ import annotations

from typing import List, Optional

from leetsync.common.errors import RepositoryError
from leetsync.db.supabase import execute, get_supabase
from .schemas import Solution, SolutionCreate


class SolutionRepository:
    table = "solutions"

    async def list_by_problem(self, problem_id: str, user_id: Optional[str] = None) -> List[Solution]:
        """Solutions for a problem, newest first, optionally scoped to one user."""
        client = await get_supabase()
        query = client.table(self.table).select("*").eq("problem_id", problem_id)
        if user_id:
            query = query.eq("user_id", user_id)
        resp = await execute(query.order("created_at", desc=True), "solutions.list_by_problem")
        return [Solution.model_validate(row) for row in resp.data or []]

    async def create(self, data: SolutionCreate) -> Solution:
        client = await get_supabase()
        resp = await execute(client.table(self.table).insert(data.model_dump(mode="json")), "solutions.insert")
        if not resp.data:
            raise RepositoryError("Failed to create solution")
        return Solution.model_validate(resp.data[0])


solution_repository = SolutionRepository()
