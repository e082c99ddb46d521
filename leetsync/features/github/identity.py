"""Problem identity inference from repository folder and file names.

Repositories of LeetCode solutions are laid out by hand, so the only link
between a folder and a judge problem is its name. Common shapes handled:

    0001-two-sum        -> slug "two-sum", id 1
    two-sum-1           -> slug "two-sum", id 1
    1. Two Sum          -> slug "two-sum", id 1
    two-sum             -> slug "two-sum", no id

All helpers here are pure and never touch the network.
"""
from __future__ import annotations

import re
from typing import Dict, Optional

_SEP = r"[-_.\s]"

_LEADING_NUMBER = re.compile(rf"^\d+{_SEP}+")
_TRAILING_NUMBER = re.compile(rf"{_SEP}+\d+$")
_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")

_PADDED_PREFIX_ID = re.compile(rf"^0*(\d+){_SEP}")
_SUFFIX_ID = re.compile(rf"{_SEP}(\d+)$")
_ANY_DIGITS = re.compile(r"\d+")

DEFAULT_LANGUAGE = "text"

EXTENSION_LANGUAGES: Dict[str, str] = {
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "c++": "cpp",
    "py": "python",
    "py3": "python",
    "java": "java",
    "js": "javascript",
    "ts": "typescript",
    "c": "c",
    "cs": "csharp",
    "go": "go",
    "rs": "rust",
    "php": "php",
    "rb": "ruby",
    "swift": "swift",
    "kt": "kotlin",
    "scala": "scala",
}


# Judge language tags -> the vocabulary produced by ``language_for_file``.
JUDGE_LANGUAGES: Dict[str, str] = {
    "python": "python",
    "python3": "python",
    "pythondata": "python",
    "cpp": "cpp",
    "c++": "cpp",
    "java": "java",
    "javascript": "javascript",
    "typescript": "typescript",
    "c": "c",
    "csharp": "csharp",
    "c#": "csharp",
    "golang": "go",
    "go": "go",
    "rust": "rust",
    "php": "php",
    "ruby": "ruby",
    "swift": "swift",
    "kotlin": "kotlin",
    "scala": "scala",
}

# Extensions the repository fetcher treats as solution source files.
SOURCE_EXTENSIONS = frozenset(EXTENSION_LANGUAGES)


def extract_slug(folder_name: str) -> str:
    """Derive a judge-style slug from a folder name.

    Strips a leading ``<digits><sep>`` run and a trailing ``<sep><digits>`` run,
    lowercases, then collapses every non-alphanumeric run into one hyphen.
    A leading number with no separator ("3sum") is part of the slug.
    """
    name = (folder_name or "").strip()
    name = _LEADING_NUMBER.sub("", name)
    name = _TRAILING_NUMBER.sub("", name)
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")


def extract_numeric_id(folder_name: str) -> Optional[int]:
    """Best-effort problem number from a folder name, or ``None`` without digits."""
    name = (folder_name or "").strip()
    for pattern in (_PADDED_PREFIX_ID, _SUFFIX_ID):
        match = pattern.search(name)
        if match:
            return int(match.group(1))
    match = _ANY_DIGITS.search(name)
    return int(match.group(0)) if match else None


def file_extension(file_name: str) -> str:
    base = (file_name or "").rsplit("/", 1)[-1]
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[-1].lower()


def language_for_file(file_name: str) -> str:
    return EXTENSION_LANGUAGES.get(file_extension(file_name), DEFAULT_LANGUAGE)


def language_for_judge(lang: str | None) -> str:
    """Map a judge language tag ("python3", "golang") onto the file-extension vocabulary."""
    key = (lang or "").strip().lower()
    return JUDGE_LANGUAGES.get(key, key or DEFAULT_LANGUAGE)


__all__ = [
    "DEFAULT_LANGUAGE",
    "EXTENSION_LANGUAGES",
    "SOURCE_EXTENSIONS",
    "extract_slug",
    "extract_numeric_id",
    "file_extension",
    "language_for_file",
    "language_for_judge",
    "JUDGE_LANGUAGES",
]
