"""Bootstrap: upsert the default topic set by name.

Run once per deployment:

    python -m leetsync.features.topics.seed
"""
from __future__ import annotations

import asyncio
import logging
from typing import List

from .repository import TopicRepository, topic_repository
from .schemas import Topic, TopicCreate, TopicUpdate

logger = logging.getLogger("topics.seed")

DEFAULT_TOPICS: List[TopicCreate] = [
    TopicCreate(name="Array", description="Linear data structures and manipulation techniques", color="blue", icon="grid"),
    TopicCreate(name="String", description="String manipulation and pattern matching", color="purple", icon="text"),
    TopicCreate(name="Dynamic Programming", description="Optimization problems and memoization", color="green", icon="chart"),
    TopicCreate(name="Tree", description="Binary trees, BST, and tree traversals", color="orange", icon="tree"),
    TopicCreate(name="Graph", description="Graph algorithms, DFS, BFS, shortest paths", color="red", icon="network"),
    TopicCreate(name="Linked List", description="Singly, doubly linked lists and operations", color="cyan", icon="link"),
    TopicCreate(name="Hash Table", description="Hash maps, sets, and hashing techniques", color="pink", icon="hash"),
    TopicCreate(name="Stack & Queue", description="LIFO and FIFO data structure operations", color="indigo", icon="stack"),
]


async def seed_default_topics(repo: TopicRepository = topic_repository) -> List[Topic]:
    seeded: List[Topic] = []
    for wanted in DEFAULT_TOPICS:
        existing = await repo.get_default_by_name(wanted.name)
        if existing is None:
            topic = await repo.create(wanted)
            logger.info("topics.seed created=%s", wanted.name)
        else:
            topic = await repo.update(
                existing.id, TopicUpdate(description=wanted.description, color=wanted.color, icon=wanted.icon)
            ) or existing
            logger.info("topics.seed refreshed=%s", wanted.name)
        seeded.append(topic)
    return seeded


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    topics = asyncio.run(seed_default_topics())
    logger.info("topics.seed done count=%d", len(topics))


if __name__ == "__main__":
    main()
