import pytest

from fakes import FakeFetcher, FakeLeetCode, FakeProblems, FakeSolutions, FakeTopics, FakeUsers, settings
from leetsync.features.github.fetcher import GitHubAPIError
from leetsync.features.github.schemas import RepositoryCodeEntry
from leetsync.features.leetcode.client import JudgeGraphQLError, JudgeUserNotFound
from leetsync.features.leetcode.schemas import JudgeProfile, JudgeSubmission, ProblemDetail
from leetsync.features.solutions.schemas import GITHUB_IMPORT_APPROACH, SUBMISSION_APPROACH, SolutionCreate
from leetsync.features.sync.schemas import NO_REPOSITORY_MESSAGE
from leetsync.features.sync.service import SyncService
from leetsync.features.topics.categorizer import TopicConfigurationError
from leetsync.features.users.schemas import GithubSettingsUpdate

pytestmark = pytest.mark.anyio("asyncio")


@pytest.fixture
def anyio_backend():
    return "asyncio"


TOPIC_NAMES = ["Array", "String", "Hash Table", "Tree", "Dynamic Programming", "Graph", "Linked List", "Stack & Queue"]

TWO_SUM_CPP = """// brute force
#include <vector>
class Solution {
public:
    std::vector<int> twoSum(std::vector<int>& nums, int target) {
        return {};
    }
};"""


def _entry(folder="0001-two-sum", slug="two-sum", number=1, code=TWO_SUM_CPP, language="cpp", file_name="solution.cpp"):
    return RepositoryCodeEntry(
        slug=slug,
        numeric_id=number,
        language=language,
        code=code,
        file_name=file_name,
        folder_name=folder,
        content_hash="0",
    )


class World:
    def __init__(self, entries=None, failures=None, fetch_error=None, topic_names=TOPIC_NAMES, **config):
        self.leetcode = FakeLeetCode()
        self.users = FakeUsers()
        self.topics = FakeTopics(topic_names)
        self.problems = FakeProblems()
        self.solutions = FakeSolutions()
        self.fetcher = FakeFetcher(entries or [], failures=failures, error=fetch_error)
        self.service = SyncService(
            leetcode=self.leetcode,
            users=self.users,
            topics=self.topics,
            problems=self.problems,
            solutions=self.solutions,
            fetcher_factory=self.fetcher,
            settings=settings(**config),
        )
        self.leetcode.profiles["alice"] = JudgeProfile(
            username="alice", total_solved=3, easy_solved=2, medium_solved=1, hard_solved=0
        )

    def submit(self, title, slug, tags=(), status="Accepted", **extra):
        self.leetcode.submissions.setdefault("alice", []).append(
            JudgeSubmission(title=title, slug=slug, status=status, topic_tags=list(tags), timestamp_seconds=1700000000, **extra)
        )

    async def link_repo(self, url="https://github.com/alice/leetcode", token=None):
        user = await self.users.find_by_leetcode_username("alice")
        if user is None:
            await self.service.sync_user("alice")
            user = await self.users.find_by_leetcode_username("alice")
        await self.users.update(user.id, GithubSettingsUpdate(github_repo_url=url, github_token=token))
        return user


async def test_two_sum_end_to_end_and_rerun_is_idempotent():
    world = World(entries=[_entry()])
    await world.link_repo()
    world.submit("Two Sum", "two-sum", tags=["Array"])

    report = await world.service.sync_user("alice")

    assert len(world.problems.rows) == 1
    problem = world.problems.rows[0]
    topic = await world.topics.get(problem.topic_id)
    assert topic.name == "Array"
    assert report.problems_processed == 1
    assert report.github_sync.processed == 1
    assert report.github_sync.created == 1
    assert len(world.solutions.rows) == 1
    solution = world.solutions.rows[0]
    assert solution.is_from_github
    assert solution.problem_id == problem.id
    assert solution.approach == GITHUB_IMPORT_APPROACH
    assert solution.name == "Solution-1"
    assert solution.github_folder_name == "0001-two-sum"

    again = await world.service.sync_user("alice")

    assert len(world.problems.rows) == 1
    assert len(world.solutions.rows) == 1
    assert again.problems_processed == 0
    assert again.problems_skipped == 1
    assert again.github_sync.created == 0
    assert again.github_sync.processed == 0
    assert again.github_sync.skipped == 1
    assert again.github_sync.processed + again.github_sync.skipped == again.github_sync.total_solutions


async def test_report_serialises_with_camel_case_keys():
    world = World()
    world.submit("Two Sum", "two-sum", tags=["Array"])

    report = await world.service.sync_user("alice")
    body = report.model_dump(by_alias=True)

    assert body["totalSubmissions"] == 1
    assert body["problemsProcessed"] == 1
    assert body["githubSync"]["message"] == NO_REPOSITORY_MESSAGE
    assert body["githubSync"]["totalSolutions"] == 0


async def test_unknown_user_aborts_without_writes():
    world = World()

    with pytest.raises(JudgeUserNotFound):
        await world.service.sync_user("ghost")
    assert world.users.rows == {}


async def test_judge_error_on_submission_list_aborts_before_writes(monkeypatch):
    world = World()

    async def rate_limited(username, limit):
        raise JudgeGraphQLError(["rate limited"])

    monkeypatch.setattr(world.leetcode, "get_recent_submissions", rate_limited)

    with pytest.raises(JudgeGraphQLError):
        await world.service.sync_user("alice")
    assert world.users.rows == {}
    assert world.problems.rows == []


async def test_user_created_then_stats_refreshed_without_touching_repo_settings():
    world = World()
    user = await world.link_repo(token="secret")
    world.leetcode.profiles["alice"] = JudgeProfile(username="alice", total_solved=9, easy_solved=5, medium_solved=3, hard_solved=1)

    await world.service.sync_user("alice")

    stored = world.users.rows[user.id]
    assert len(world.users.rows) == 1
    assert stored.total_solved == 9
    assert stored.github_repo_url == "https://github.com/alice/leetcode"
    assert stored.github_token == "secret"
    assert world.fetcher.tokens[-1] == "secret"


async def test_empty_submission_list_still_updates_user():
    world = World()

    report = await world.service.sync_user("alice")

    assert report.total_submissions == 0
    assert report.message == "User found but no submissions available"
    assert len(world.users.rows) == 1


async def test_non_accepted_submissions_are_ignored():
    world = World()
    world.submit("Two Sum", "two-sum", status="Wrong Answer")

    report = await world.service.sync_user("alice")

    assert world.problems.rows == []
    assert report.problems_processed == 0
    assert report.problems_skipped == 0


async def test_detail_enrichment_supplies_tags_difficulty_and_number():
    world = World()
    world.submit("Invert Binary Tree", "invert-binary-tree")
    world.leetcode.details["invert-binary-tree"] = ProblemDetail(
        slug="invert-binary-tree", difficulty="Easy", topic_tags=["Tree", "Depth-First Search"], numeric_id=226
    )

    await world.service.sync_user("alice")

    problem = world.problems.rows[0]
    assert problem.numeric_id == 226
    assert problem.difficulty == "Easy"
    assert problem.tags == ["Tree", "Depth-First Search"]
    assert (await world.topics.get(problem.topic_id)).name == "Tree"


async def test_missing_detail_defaults_to_medium():
    world = World()
    world.submit("Reverse Integer", "reverse-integer")

    await world.service.sync_user("alice")

    problem = world.problems.rows[0]
    assert problem.difficulty == "Medium"
    assert problem.numeric_id is None
    assert (await world.topics.get(problem.topic_id)).name == "Array"


async def test_enrichment_failure_skips_that_submission_only():
    world = World()
    world.submit("Two Sum", "two-sum", tags=["Array"])
    world.submit("Valid Parentheses", "valid-parentheses")
    world.leetcode.failing_details.add("two-sum")

    report = await world.service.sync_user("alice")

    assert [p.slug for p in world.problems.rows] == ["valid-parentheses"]
    assert report.problems_processed == 1
    assert report.problems_skipped == 1


async def test_missing_default_topic_is_a_hard_error():
    world = World(topic_names=["Graph"])
    world.submit("Reverse Integer", "reverse-integer")

    with pytest.raises(TopicConfigurationError):
        await world.service.sync_user("alice")


async def test_submission_code_is_captured_when_available():
    world = World(entries=[_entry(code=TWO_SUM_CPP)])
    await world.link_repo()
    world.submit("Two Sum", "two-sum", tags=["Array"], language="cpp", code=TWO_SUM_CPP)

    report = await world.service.sync_user("alice")

    assert len(world.solutions.rows) == 1
    assert world.solutions.rows[0].approach == SUBMISSION_APPROACH
    # Repository copy of the same code is a duplicate of the captured submission.
    assert report.github_sync.created == 0
    assert report.github_sync.skipped == 1


async def test_submission_code_fetched_with_session():
    world = World(leetcode_session="cookie")
    world.submit("Two Sum", "two-sum", tags=["Array"], id="101", language="python3")
    world.leetcode.codes["101"] = "class Solution:\n    pass"

    await world.service.sync_user("alice")

    assert world.solutions.rows[0].language == "python"
    assert world.solutions.rows[0].code == "class Solution:\n    pass"


async def test_no_repository_configured():
    world = World(entries=[_entry()])
    world.submit("Two Sum", "two-sum", tags=["Array"])

    report = await world.service.sync_user("alice")

    assert report.github_sync.message == NO_REPOSITORY_MESSAGE
    assert world.fetcher.tokens == []
    assert world.solutions.rows == []


async def test_bad_repository_url_is_reported_not_raised():
    world = World(entries=[_entry()])
    await world.link_repo(url="https://example.com/not-github")
    world.submit("Two Sum", "two-sum", tags=["Array"])

    report = await world.service.sync_user("alice")

    assert report.problems_processed == 1
    assert report.github_sync.error
    assert world.solutions.rows == []


async def test_repository_root_failure_is_reported():
    world = World(fetch_error=GitHubAPIError("GitHub API error: 404", status_code=404))
    await world.link_repo()

    report = await world.service.sync_user("alice")

    assert report.github_sync.error == "GitHub API error: 404"


async def test_unmatched_and_failed_entries_count_as_skipped():
    entries = [
        _entry(),
        _entry(folder="9999-unknown", slug="unknown", number=9999),
        _entry(folder="0001-two-sum", code="", file_name="empty.cpp"),
    ]
    world = World(entries=entries, failures=["0002-add-two-numbers"])
    await world.link_repo()
    world.submit("Two Sum", "two-sum", tags=["Array"])

    report = await world.service.sync_user("alice")
    github = report.github_sync

    assert github.total_solutions == 4
    assert github.processed == 1
    assert github.created == 1
    assert github.skipped == 3
    assert github.processed + github.skipped == github.total_solutions


async def test_numeric_id_resolves_when_slug_differs():
    world = World(entries=[_entry(folder="1-twosum", slug="twosum", number=1)])
    await world.link_repo()
    world.submit("Two Sum", "two-sum", tags=["Array"])
    world.leetcode.details["two-sum"] = ProblemDetail(slug="two-sum", difficulty="Easy", topic_tags=["Array"], numeric_id=1)

    report = await world.service.sync_user("alice")

    assert report.github_sync.created == 1
    assert world.solutions.rows[0].problem_id == world.problems.rows[0].id


async def test_duplicates_within_one_sync_and_naming():
    python_solution = "class Solution:\n    def twoSum(self, nums, target):\n        return []"
    entries = [
        _entry(),
        _entry(file_name="copy.cpp", code="\n".join(line.upper() for line in TWO_SUM_CPP.splitlines())),
        _entry(file_name="solution.py", code=python_solution, language="python"),
    ]
    world = World(entries=entries)
    await world.link_repo()
    world.submit("Two Sum", "two-sum", tags=["Array"])

    report = await world.service.sync_user("alice")

    assert report.github_sync.created == 2
    assert report.github_sync.processed == 2
    assert report.github_sync.skipped == 1
    assert report.github_sync.total_solutions == 3
    assert [s.name for s in world.solutions.rows] == ["Solution-1", "Solution-2"]
    assert [s.language for s in world.solutions.rows] == ["cpp", "python"]


async def test_existing_solutions_are_read_once_per_problem():
    world = World(entries=[_entry(), _entry(file_name="b.cpp", code="int main() {}")])
    await world.link_repo()
    world.submit("Two Sum", "two-sum", tags=["Array"])
    world.solutions.rows.clear()
    world.solutions.list_calls = 0

    await world.service.sync_user("alice")

    assert world.solutions.list_calls == 1


async def test_failing_entry_write_is_contained(monkeypatch):
    world = World(entries=[_entry(), _entry(slug="two-sum", file_name="b.py", language="python", code="x = 1")])
    await world.link_repo()
    world.submit("Two Sum", "two-sum", tags=["Array"])
    real_create = world.solutions.create
    calls = []

    async def flaky_create(data: SolutionCreate):
        calls.append(data.github_file_name)
        if len(calls) == 1:
            raise RuntimeError("insert failed")
        return await real_create(data)

    monkeypatch.setattr(world.solutions, "create", flaky_create)

    report = await world.service.sync_user("alice")

    assert report.github_sync.error is None
    assert report.github_sync.created == 1
    assert report.github_sync.skipped == 1
    assert report.github_sync.processed == 1
    assert report.github_sync.total_solutions == 2
