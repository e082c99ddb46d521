from __future__ import annotations

import logging
from typing import List, Optional

from leetsync.features.problems.repository import ProblemRepository, problem_repository
from leetsync.features.problems.schemas import Problem
from .membership import problems_for_topic
from .repository import TopicRepository, topic_repository
from .schemas import CustomTopicCreate, Topic, TopicCreate, TopicWithCounts

logger = logging.getLogger("topics.service")


class TopicService:
    def __init__(
        self,
        topics: TopicRepository = topic_repository,
        problems: ProblemRepository = problem_repository,
    ) -> None:
        self.topics = topics
        self.problems = problems

    async def topics_with_counts(self, user_id: Optional[str] = None) -> List[TopicWithCounts]:
        """Topics with per-difficulty counts. Counts need a user; without one they are zero."""
        topics = await self.topics.list_topics(user_id)
        problems = await self.problems.list_by_user(user_id) if user_id else []
        result: List[TopicWithCounts] = []
        for topic in topics:
            members = problems_for_topic(topic.name, problems)
            result.append(
                TopicWithCounts(
                    **topic.model_dump(),
                    total_problems=len(members),
                    easy=sum(1 for p in members if p.difficulty == "Easy"),
                    medium=sum(1 for p in members if p.difficulty == "Medium"),
                    hard=sum(1 for p in members if p.difficulty == "Hard"),
                )
            )
        return result

    async def problems_in_topic(self, topic_id: str, user_id: str) -> Optional[List[Problem]]:
        """Problems whose tags place them in the topic, or None if the topic does not exist."""
        topic = await self.topics.get(topic_id)
        if topic is None:
            return None
        return problems_for_topic(topic.name, await self.problems.list_by_user(user_id))

    async def create_custom(self, data: CustomTopicCreate) -> Topic:
        topic = await self.topics.create(TopicCreate(**data.model_dump(), is_custom=True))
        logger.info("topics.custom_created user_id=%s name=%s", data.user_id, topic.name)
        return topic

    async def delete_custom(self, topic_id: str, user_id: str) -> bool:
        return await self.topics.delete_custom(topic_id, user_id)


topic_service = TopicService()
