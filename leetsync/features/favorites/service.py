from __future__ import annotations

from typing import List, Optional

from leetsync.features.problems.repository import ProblemRepository, problem_repository
from leetsync.features.problems.schemas import Problem
from .repository import FavoriteRepository, favorite_repository
from .schemas import Favorite


class FavoriteService:
    def __init__(
        self,
        favorites: FavoriteRepository = favorite_repository,
        problems: ProblemRepository = problem_repository,
    ) -> None:
        self.favorites = favorites
        self.problems = problems

    async def add(self, user_id: str, problem_id: str) -> Optional[Favorite]:
        """Favorite a problem; None when the problem does not exist. Raises AlreadyExistsError on repeats."""
        if await self.problems.get(problem_id) is None:
            return None
        return await self.favorites.add(user_id, problem_id)

    async def list_problems(self, user_id: str) -> List[Problem]:
        result: List[Problem] = []
        for problem_id in await self.favorites.list_problem_ids(user_id):
            problem = await self.problems.get(problem_id)
            if problem is not None:
                result.append(problem)
        return result


favorite_service = FavoriteService()
