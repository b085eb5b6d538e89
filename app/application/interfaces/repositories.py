"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Storage faults are returned as FetchErr values, never raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.fetch_result import FetchResult
    from app.application.services.entity_registry import EntityAccessor


class IEntityRowRepository(Protocol):
    """Protocol for the backing-store row reader used by the resolver (DIP)."""

    async def fetch_by_id(
        self, accessor: EntityAccessor, entity_id: int
    ) -> FetchResult:
        """Point lookup by primary key. FetchOk with zero or one row."""

    async def fetch_lookup_rows(
        self, lookup: Any, subject_id: int, limit: int
    ) -> FetchResult:
        """Execute a rule's declarative lookup for subject_id, at most limit rows."""

    async def search_rows(
        self,
        accessor: EntityAccessor,
        query: str | None,
        limit: int,
        offset: int = 0,
    ) -> FetchResult:
        """Case-insensitive substring match over the type's searchable fields (OR)."""
