"""Search input sanitization: LIKE escaping and query normalization."""

LIKE_ESCAPE_CHAR = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE/ILIKE wildcards so value matches literally.

    Use with ``escape=LIKE_ESCAPE_CHAR`` on the SQLAlchemy operator.

    Args:
        value: Raw user search text.

    Returns:
        The text with backslash, % and _ escaped.
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains_pattern(value: str) -> str:
    """Substring pattern for ILIKE: %<escaped value>%."""
    return f"%{escape_like(value)}%"


def normalize_query(query: str | None) -> str | None:
    """Strip surrounding whitespace; empty or blank queries become None (match all)."""
    if query is None:
        return None
    stripped = query.strip()
    return stripped or None
