from __future__ import annotations

from typing import Dict, List

from leetsync.features.solutions.duplicates import is_duplicate
from leetsync.features.solutions.repository import SolutionRepository
from leetsync.features.solutions.schemas import Solution, SolutionCreate, solution_name


class SolutionLedger:
    """Per-sync view of one user's solutions, keyed by problem.

    Each problem's solutions are read from storage once, on first use, and
    every solution written through ``create`` is appended, so later entries in
    the same sync are checked against earlier ones without re-querying. This
    holds only while a single sync per user runs at a time.
    """

    def __init__(self, repo: SolutionRepository, user_id: str) -> None:
        self._repo = repo
        self._user_id = user_id
        self._by_problem: Dict[str, List[Solution]] = {}

    async def solutions_for(self, problem_id: str) -> List[Solution]:
        if problem_id not in self._by_problem:
            self._by_problem[problem_id] = await self._repo.list_by_problem(problem_id, self._user_id)
        return self._by_problem[problem_id]

    async def is_duplicate(self, problem_id: str, code: str, language: str) -> bool:
        return is_duplicate(code, language, await self.solutions_for(problem_id))

    async def next_name(self, problem_id: str) -> str:
        return solution_name(len(await self.solutions_for(problem_id)))

    async def create(self, data: SolutionCreate) -> Solution:
        known = await self.solutions_for(data.problem_id)
        solution = await self._repo.create(data)
        known.append(solution)
        return solution
