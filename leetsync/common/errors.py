"""Persistence-layer error types shared by the feature repositories."""
from __future__ import annotations

from postgrest.exceptions import APIError

UNIQUE_VIOLATION = "23505"


class RepositoryError(RuntimeError):
    """Raised when the backing store does not return the row it was asked to write."""


class AlreadyExistsError(RepositoryError):
    """Raised when an insert hits a unique constraint."""


def is_unique_violation(exc: APIError) -> bool:
    code = getattr(exc, "code", None)
    if code == UNIQUE_VIOLATION:
        return True
    msg = str(getattr(exc, "message", "") or exc).lower()
    return "duplicate key" in msg
