"""Assigns a judge submission to one of the seeded topics.

Priority: judge tags first, then title keywords, then the default topic.
Judge tags and topic names use different granularity ("Hash Table" vs
"hash", "Binary Tree" vs "tree"), so a tag matches a topic when either
string contains the other. An empty tag is contained in every variant, so it
matches the first seeded topic in ``TAG_VARIANTS`` order (Array).
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .schemas import Topic

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "Array"

# Topic name -> tag variants, checked in this order.
TAG_VARIANTS: Dict[str, Tuple[str, ...]] = {
    "Array": ("array", "arrays"),
    "String": ("string", "strings", "palindrome", "substring"),
    "Hash Table": ("hash", "map", "hashmap", "hash-table", "hashtable"),
    "Tree": ("tree", "trees", "binary-tree", "binary tree"),
    "Dynamic Programming": ("dynamic-programming", "dp", "dynamic programming"),
    "Graph": ("graph", "graphs"),
    "Linked List": ("linked-list", "linked list", "linkedlist"),
    "Stack & Queue": ("stack", "queue", "stacks", "queues"),
}

TITLE_KEYWORDS: List[Tuple[Tuple[str, ...], str]] = [
    (("array", "sum", "target", "duplicate"), "Array"),
    (("string", "palindrome", "substring", "anagram"), "String"),
    (("tree", "binary", "traverse"), "Tree"),
    (("hash", "map", "frequency"), "Hash Table"),
    (("dynamic", "dp", "fibonacci", "climb"), "Dynamic Programming"),
    (("linked", "list", "node"), "Linked List"),
    (("stack", "queue", "parentheses"), "Stack & Queue"),
    (("graph", "bfs", "dfs"), "Graph"),
]


class TopicConfigurationError(RuntimeError):
    """The default topic is missing from the available topics (seeding was not run)."""


def normalize_tag(tag: str) -> str:
    return "-".join((tag or "").lower().split())


def _tag_matches(tag: str, variants: Iterable[str]) -> bool:
    return any(v in tag or tag in v for v in variants)


def _by_name(topics: Sequence[Topic], name: str) -> Optional[Topic]:
    return next((t for t in topics if t.name == name), None)


def categorize(title: str, tags: Sequence[str], available_topics: Sequence[Topic]) -> Topic:
    for raw in tags or []:
        tag = normalize_tag(raw)
        for topic_name, variants in TAG_VARIANTS.items():
            if not _tag_matches(tag, variants):
                continue
            topic = _by_name(available_topics, topic_name)
            if topic is not None:
                logger.debug("categorize.tag tag=%s topic=%s", raw, topic_name)
                return topic

    lowered = (title or "").lower()
    for keywords, topic_name in TITLE_KEYWORDS:
        if any(k in lowered for k in keywords):
            topic = _by_name(available_topics, topic_name)
            if topic is not None:
                logger.debug("categorize.title title=%s topic=%s", title, topic_name)
                return topic

    default = _by_name(available_topics, DEFAULT_TOPIC)
    if default is None:
        raise TopicConfigurationError(
            f"Default topic {DEFAULT_TOPIC!r} is not seeded; run the topic seed bootstrap"
        )
    logger.debug("categorize.default title=%s", title)
    return default


__all__ = ["DEFAULT_TOPIC", "TAG_VARIANTS", "TITLE_KEYWORDS", "TopicConfigurationError", "categorize", "normalize_tag"]
