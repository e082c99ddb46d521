"""Read-time topic membership.

A problem shows up under a topic when one of its tags matches the topic's
variants, regardless of the ``topic_id`` stored when it was created. Retagging
a problem therefore moves it between topics without rewriting anything.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from leetsync.features.problems.schemas import Problem

MEMBERSHIP_VARIANTS: Dict[str, Tuple[str, ...]] = {
    "Array": ("array", "arrays"),
    "String": ("string", "strings"),
    "Dynamic Programming": ("dynamic-programming", "dp", "dynamic programming"),
    "Tree": ("tree", "trees", "binary-tree", "binary tree"),
    "Graph": ("graph", "graphs"),
    "Linked List": ("linked-list", "linked list"),
    "Hash Table": ("hash-table", "hash table", "hashtable", "hashmap", "hash map"),
    "Stack & Queue": ("stack", "queue", "stacks", "queues"),
    "Two Pointers": ("two-pointers", "two pointers"),
    "Binary Search": ("binary-search", "binary search"),
    "Sliding Window": ("sliding-window", "sliding window"),
    "Backtracking": ("backtracking",),
    "Greedy": ("greedy",),
    "Math": ("math", "mathematics"),
    "Bit Manipulation": ("bit-manipulation", "bit manipulation", "bitwise"),
    "Heap": ("heap", "priority-queue", "priority queue"),
    "Trie": ("trie",),
    "Union Find": ("union-find", "union find", "disjoint-set"),
    "Sorting": ("sorting", "sort"),
    "Searching": ("searching", "search"),
}


def variants_for_topic(topic_name: str) -> Tuple[str, ...]:
    # Custom topics match on their own lowercased name.
    return MEMBERSHIP_VARIANTS.get(topic_name, ((topic_name or "").lower(),))


def problem_in_topic(problem: Problem, topic_name: str) -> bool:
    variants = variants_for_topic(topic_name)
    return any(v in tag.lower() for tag in problem.tags or [] for v in variants)


def problems_for_topic(topic_name: str, problems: Iterable[Problem]) -> List[Problem]:
    return [p for p in problems if problem_in_topic(p, topic_name)]
