import pytest
from postgrest.exceptions import APIError

from fakes import FakeProblems, FakeUsers
from leetsync.common.errors import is_unique_violation
from leetsync.features.favorites.service import FavoriteService
from leetsync.features.github.schemas import RepositoryUrlError
from leetsync.features.github.service import get_github_settings, save_github_settings
from leetsync.features.problems.schemas import ProblemCreate
from leetsync.features.users.schemas import UserCreate

pytestmark = pytest.mark.anyio("asyncio")


@pytest.fixture
def anyio_backend():
    return "asyncio"


async def test_save_and_read_github_settings():
    users = FakeUsers()
    user = await users.create(UserCreate(username="alice", leetcode_username="alice", total_solved=4))

    saved = await save_github_settings(user.id, "https://github.com/alice/lc", "tok", users=users)

    assert saved.hasToken is True
    assert users.rows[user.id].total_solved == 4
    read = await get_github_settings(user.id, users=users)
    assert read.githubRepoUrl == "https://github.com/alice/lc"

    cleared = await save_github_settings(user.id, "https://github.com/alice/lc", None, users=users)
    assert cleared.hasToken is False


async def test_save_github_settings_validates_url_and_user():
    users = FakeUsers()
    with pytest.raises(RepositoryUrlError):
        await save_github_settings("u1", "not a url", users=users)
    assert await save_github_settings("missing", "https://github.com/a/b", users=users) is None
    assert await get_github_settings("missing", users=users) is None


class _FakeFavorites:
    def __init__(self):
        self.ids = []

    async def add(self, user_id, problem_id):
        self.ids.append(problem_id)
        return {"user_id": user_id, "problem_id": problem_id}

    async def list_problem_ids(self, user_id):
        return list(reversed(self.ids)) + ["deleted-problem"]


async def test_favorites_require_existing_problem():
    problems = FakeProblems()
    problem = await problems.create(ProblemCreate(title="Two Sum", slug="two-sum", difficulty="Easy", user_id="u1"))
    service = FavoriteService(favorites=_FakeFavorites(), problems=problems)

    assert await service.add("u1", "missing") is None
    assert await service.add("u1", problem.id) is not None
    assert [p.slug for p in await service.list_problems("u1")] == ["two-sum"]


def test_unique_violation_detection():
    assert is_unique_violation(APIError({"code": "23505", "message": "duplicate key value"}))
    assert not is_unique_violation(APIError({"code": "42P01", "message": "relation does not exist"}))
