import pytest

from leetsync.features.topics.categorizer import TopicConfigurationError, categorize, normalize_tag
from leetsync.features.topics.schemas import Topic

NAMES = ["Array", "String", "Hash Table", "Tree", "Dynamic Programming", "Graph", "Linked List", "Stack & Queue"]
TOPICS = [Topic(id=str(i), name=name) for i, name in enumerate(NAMES, start=1)]


def test_normalize_tag():
    assert normalize_tag("Hash  Table") == "hash-table"


@pytest.mark.parametrize(
    "tags, expected",
    [
        (["Hash Table"], "Hash Table"),
        (["Binary Tree"], "Tree"),
        (["Dynamic Programming"], "Dynamic Programming"),
        (["DP"], "Dynamic Programming"),
        (["Linked List", "Array"], "Linked List"),
        (["Stack"], "Stack & Queue"),
    ],
)
def test_tags_take_priority(tags, expected):
    assert categorize("Reverse Integer", tags, TOPICS).name == expected


def test_first_matching_tag_wins():
    assert categorize("Anything", ["Graph", "String"], TOPICS).name == "Graph"


def test_unmatched_tags_fall_through_to_title():
    assert categorize("Two Sum", ["Math"], TOPICS).name == "Array"
    assert categorize("Valid Parentheses", [], TOPICS).name == "Stack & Queue"
    assert categorize("Longest Palindromic Substring", [], TOPICS).name == "String"


def test_default_topic_when_nothing_matches():
    assert categorize("Reverse Integer", [], TOPICS).name == "Array"


def test_tag_for_unseeded_topic_is_skipped():
    topics = [t for t in TOPICS if t.name != "Graph"]
    assert categorize("Reverse Integer", ["Graph"], topics).name == "Array"


def test_missing_default_topic_raises():
    topics = [t for t in TOPICS if t.name != "Array"]
    with pytest.raises(TopicConfigurationError):
        categorize("Reverse Integer", [], topics)


def test_result_is_always_an_available_topic():
    for title, tags in [("Clone Graph", ["Graph"]), ("x", ["Unknown"]), ("Climbing Stairs", [])]:
        assert categorize(title, tags, TOPICS) in TOPICS


def test_empty_tag_matches_first_topic_in_order():
    assert categorize("Binary Tree Paths", ["", "Tree"], TOPICS).name == "Array"
    assert categorize("Binary Tree Paths", ["Tree", ""], TOPICS).name == "Tree"
