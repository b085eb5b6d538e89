"""Shared utilities: search input sanitization."""

from app.shared.utils.sanitization import (
    LIKE_ESCAPE_CHAR,
    contains_pattern,
    escape_like,
    normalize_query,
)

__all__ = [
    "LIKE_ESCAPE_CHAR",
    "contains_pattern",
    "escape_like",
    "normalize_query",
]
