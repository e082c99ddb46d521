"""Duplicate-solution detection across submission and repository sources.

Two code blobs count as the same solution when their languages match and
their *normalised prefixes* are equal: the first five non-blank,
non-comment lines, lowercased with whitespace runs collapsed. Solutions that
share boilerplate in those five lines are reported as duplicates; that false
positive is accepted and existing stored rows were deduplicated under it.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional, Protocol

PREFIX_LINES = 5

_WS_RUN = re.compile(r"\s+")


class CodeLike(Protocol):
    code: str
    language: str


def _is_comment(line: str) -> bool:
    return line.startswith("//") or line.startswith("/*") or line == "*/" or line.startswith("*")


def normalized_prefix(code: Optional[str], lines: int = PREFIX_LINES) -> str:
    text = (code or "").replace("\r\n", "\n").replace("\r", "\n")
    kept = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line or _is_comment(line):
            continue
        kept.append(line)
        if len(kept) == lines:
            break
    return _WS_RUN.sub(" ", "\n".join(kept).lower()).strip()


def is_duplicate(candidate_code: str, candidate_language: str, existing: Iterable[CodeLike]) -> bool:
    """Return True if any existing solution matches the candidate's language and prefix."""
    prefix = normalized_prefix(candidate_code)
    for solution in existing:
        if solution.language != candidate_language:
            continue
        if normalized_prefix(solution.code) == prefix:
            return True
    return False


def content_fingerprint(text: str) -> str:
    """Cheap exact-blob signal: ``h = h * 31 + unit`` over UTF-16 code units, wrapped to signed 32 bits.

    Not used for the duplicate decision above.
    """
    h = 0
    data = (text or "").encode("utf-16-le")
    for i in range(0, len(data), 2):
        h = (h * 31 + (data[i] | (data[i + 1] << 8))) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return str(h)


__all__ = ["PREFIX_LINES", "normalized_prefix", "is_duplicate", "content_fingerprint"]
