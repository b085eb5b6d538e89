"""Result of one backing-store fetch: rows on success, the fault on failure.

Repositories return these instead of raising storage errors so the
resolver can skip a failing rule (or search type) and keep going.
"""

from dataclasses import dataclass, field
from typing import Any

from app.domain.exceptions import StorageFaultException


@dataclass(frozen=True)
class FetchOk:
    """Fetch succeeded; rows may be empty."""

    rows: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class FetchErr:
    """Fetch failed at the storage layer."""

    fault: StorageFaultException


FetchResult = FetchOk | FetchErr
