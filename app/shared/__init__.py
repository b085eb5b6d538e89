"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import contains_pattern, escape_like, normalize_query

__all__ = [
    "contains_pattern",
    "escape_like",
    "normalize_query",
]
