"""User-triggered reconciliation of judge submissions and repository code.

One call to ``SyncService.sync_user`` runs, in order:

  1. profile fetch (unknown judge user aborts the sync)
  2. recent accepted submissions fetch
  3. local user find-or-create plus stats update
  4. problem categorisation for submissions not yet stored
  5. repository import, when the user has a repository configured
  6. report assembly

Problems are created before the repository import so that a folder can attach
to a problem first seen in the same sync. The repository phase never creates
problems and its failures end up in ``githubSync.error`` rather than aborting
the sync. Every repository entry found is counted once, either as processed
(a solution was written) or as skipped. Nothing is retried.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from leetsync.core.config import Settings, get_settings
from leetsync.features.github.fetcher import RepositoryContentFetcher
from leetsync.features.github.identity import language_for_judge
from leetsync.features.github.schemas import RepositoryCodeEntry, parse_repo_url
from leetsync.features.leetcode.client import JudgeAPIError, LeetCodeClient, leetcode_client
from leetsync.features.leetcode.schemas import JudgeProfile, JudgeSubmission
from leetsync.features.problems.repository import ProblemRepository, problem_repository
from leetsync.features.problems.schemas import Problem, ProblemCreate
from leetsync.features.solutions.repository import SolutionRepository, solution_repository
from leetsync.features.solutions.schemas import GITHUB_IMPORT_APPROACH, SUBMISSION_APPROACH, SolutionCreate
from leetsync.features.topics.categorizer import categorize
from leetsync.features.topics.repository import TopicRepository, topic_repository
from leetsync.features.topics.schemas import Topic
from leetsync.features.users.repository import UserRepository, user_repository
from leetsync.features.users.schemas import User, UserCreate, UserStatsUpdate
from .ledger import SolutionLedger
from .schemas import NO_REPOSITORY_MESSAGE, GithubSyncReport, SyncReport

logger = logging.getLogger("sync.service")

DEFAULT_DIFFICULTY = "Medium"

FetcherFactory = Callable[[Optional[str]], RepositoryContentFetcher]


class SyncService:
    def __init__(
        self,
        *,
        leetcode: LeetCodeClient = leetcode_client,
        users: UserRepository = user_repository,
        topics: TopicRepository = topic_repository,
        problems: ProblemRepository = problem_repository,
        solutions: SolutionRepository = solution_repository,
        fetcher_factory: FetcherFactory = RepositoryContentFetcher,
        settings: Optional[Settings] = None,
    ) -> None:
        self.leetcode = leetcode
        self.users = users
        self.topics = topics
        self.problems = problems
        self.solutions = solutions
        self.fetcher_factory = fetcher_factory
        self.settings = settings or get_settings()

    async def sync_user(self, username: str) -> SyncReport:
        logger.info("sync.start username=%s", username)
        profile = await self.leetcode.get_user_profile(username)
        submissions = await self.leetcode.get_recent_submissions(username, self.settings.leetcode_recent_limit)
        user = await self._upsert_user(username, profile)

        ledger = SolutionLedger(self.solutions, user.id)
        processed, skipped = await self._process_submissions(user, submissions, ledger)
        github = await self._sync_repository(user, ledger)

        report = SyncReport(
            username=username,
            message="Data fetched successfully" if submissions else "User found but no submissions available",
            total_submissions=len(submissions),
            problems_processed=processed,
            problems_skipped=skipped,
            github_sync=github,
        )
        logger.info(
            "sync.done username=%s submissions=%d processed=%d skipped=%d github_created=%d",
            username,
            report.total_submissions,
            processed,
            skipped,
            github.created,
        )
        return report

    async def _upsert_user(self, username: str, profile: JudgeProfile) -> User:
        stats = UserStatsUpdate(
            leetcode_username=username,
            total_solved=profile.total_solved,
            easy_solved=profile.easy_solved,
            medium_solved=profile.medium_solved,
            hard_solved=profile.hard_solved,
            last_fetched_at=datetime.now(timezone.utc),
        )
        existing = await self.users.find_by_leetcode_username(username)
        if existing is None:
            logger.info("sync.user_created username=%s", username)
            return await self.users.create(UserCreate(username=username, **stats.model_dump()))
        # Stats-only patch: repository URL and token are not part of the payload.
        updated = await self.users.update(existing.id, stats)
        return updated or existing

    async def _process_submissions(
        self, user: User, submissions: List[JudgeSubmission], ledger: SolutionLedger
    ) -> Tuple[int, int]:
        if not submissions:
            return 0, 0
        topics = await self.topics.list_topics(user.id)
        known: Dict[str, Problem] = {p.slug: p for p in await self.problems.list_by_user(user.id)}
        processed = skipped = 0
        for submission in submissions:
            if not submission.accepted:
                continue
            if submission.slug in known:
                logger.debug("sync.problem_exists slug=%s", submission.slug)
                skipped += 1
                continue
            try:
                problem = await self._create_problem(user, submission, topics)
            except JudgeAPIError as e:
                logger.warning("sync.enrichment_failed slug=%s error=%s", submission.slug, e)
                skipped += 1
                continue
            known[problem.slug] = problem
            processed += 1
            await self._capture_submission_code(user, problem, submission, ledger)
        return processed, skipped

    async def _create_problem(self, user: User, submission: JudgeSubmission, topics: List[Topic]) -> Problem:
        detail = await self.leetcode.get_problem_detail(submission.slug)
        tags = (detail.topic_tags if detail and detail.topic_tags else None) or submission.topic_tags
        difficulty = (detail.difficulty if detail else None) or submission.difficulty or DEFAULT_DIFFICULTY
        topic = categorize(submission.title, tags, topics)
        problem = await self.problems.create(
            ProblemCreate(
                numeric_id=detail.numeric_id if detail else None,
                title=submission.title,
                slug=submission.slug,
                difficulty=difficulty,
                tags=list(tags),
                topic_id=topic.id,
                user_id=user.id,
                language=submission.language,
                submission_date=submission.accepted_at,
            )
        )
        logger.info("sync.problem_created slug=%s topic=%s", problem.slug, topic.name)
        return problem

    async def _capture_submission_code(
        self, user: User, problem: Problem, submission: JudgeSubmission, ledger: SolutionLedger
    ) -> None:
        code = submission.code
        if not code and submission.id and self.settings.leetcode_session:
            try:
                code = await self.leetcode.get_submission_code(submission.id)
            except JudgeAPIError as e:
                logger.warning("sync.code_fetch_failed slug=%s error=%s", submission.slug, e)
                return
        if not code:
            return
        language = language_for_judge(submission.language)
        if await ledger.is_duplicate(problem.id, code, language):
            return
        await ledger.create(
            SolutionCreate(
                problem_id=problem.id,
                user_id=user.id,
                name=await ledger.next_name(problem.id),
                approach=SUBMISSION_APPROACH,
                language=language,
                code=code,
                submission_date=submission.accepted_at,
            )
        )

    async def _sync_repository(self, user: User, ledger: SolutionLedger) -> GithubSyncReport:
        if not user.github_repo_url:
            return GithubSyncReport(message=NO_REPOSITORY_MESSAGE)
        report = GithubSyncReport()
        try:
            ref = parse_repo_url(user.github_repo_url)
            logger.info("sync.github_start repo=%s", ref.full_name)
            fetcher = self.fetcher_factory(user.github_token)
            async for entry in fetcher.iter_code(ref.owner, ref.repo):
                report.total_solutions += 1
                try:
                    await self._import_entry(user, entry, ledger, report)
                except Exception:  # noqa: BLE001 - one bad entry must not stop the import
                    logger.exception("sync.github_entry_failed folder=%s file=%s", entry.folder_name, entry.file_name)
                    report.skipped += 1
            # Unreadable folders and files count as found-but-skipped.
            report.total_solutions += len(fetcher.failures)
            report.skipped += len(fetcher.failures)
        except Exception as e:  # noqa: BLE001 - repository phase never aborts the sync
            logger.exception("sync.github_failed user_id=%s", user.id)
            report.error = str(e)
        logger.info(
            "sync.github_done total=%d created=%d skipped=%d error=%s",
            report.total_solutions,
            report.created,
            report.skipped,
            report.error,
        )
        return report

    async def _resolve_problem(self, user: User, entry: RepositoryCodeEntry) -> Optional[Problem]:
        problem = await self.problems.find_by_slug(entry.slug, user.id) if entry.slug else None
        if problem is None and entry.numeric_id is not None:
            problem = await self.problems.find_by_numeric_id(entry.numeric_id, user.id)
        return problem

    async def _import_entry(
        self, user: User, entry: RepositoryCodeEntry, ledger: SolutionLedger, report: GithubSyncReport
    ) -> None:
        problem = await self._resolve_problem(user, entry)
        if problem is None or not entry.code:
            logger.debug("sync.github_unmatched slug=%s number=%s", entry.slug, entry.numeric_id)
            report.skipped += 1
            return
        if await ledger.is_duplicate(problem.id, entry.code, entry.language):
            logger.debug("sync.github_duplicate problem=%s language=%s", problem.slug, entry.language)
            report.skipped += 1
            return
        solution = await ledger.create(
            SolutionCreate(
                problem_id=problem.id,
                user_id=user.id,
                name=await ledger.next_name(problem.id),
                approach=GITHUB_IMPORT_APPROACH,
                language=entry.language,
                code=entry.code,
                is_from_github=True,
                github_file_name=entry.file_name,
                github_folder_name=entry.folder_name,
                content_hash=entry.content_hash,
                submission_date=datetime.now(timezone.utc),
            )
        )
        report.processed += 1
        report.created += 1
        logger.info("sync.github_created problem=%s name=%s language=%s", problem.slug, solution.name, entry.language)


sync_service = SyncService()
