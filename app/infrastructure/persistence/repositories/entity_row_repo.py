"""Entity row repository: point lookups, rule lookups, and substring search.

Implements IEntityRowRepository over an AsyncSession. Every method returns
a FetchResult; SQLAlchemy errors never escape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import false, or_, select

from app.application.dtos.fetch_result import FetchResult
from app.infrastructure.persistence.lookups import (
    AssociationLookup,
    ForeignKeyLookup,
    ParentLookup,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.sanitization import LIKE_ESCAPE_CHAR, contains_pattern

if TYPE_CHECKING:
    from app.application.services.entity_registry import EntityAccessor


class EntityRowRepository(BaseRepository):
    """Reads rows for registered entity types. Read-only."""

    async def fetch_by_id(
        self, accessor: EntityAccessor, entity_id: int
    ) -> FetchResult:
        """Point lookup by primary key (zero or one row)."""
        model: Any = accessor.model
        stmt = select(model).where(model.id == entity_id).limit(1)
        return await self._fetch_rows(
            stmt, entity_type=accessor.entity_type.value, operation="get_row"
        )

    async def fetch_lookup_rows(
        self, lookup: Any, subject_id: int, limit: int
    ) -> FetchResult:
        """Execute a rule lookup for subject_id; at most limit rows, ordered by id."""
        if limit <= 0:
            raise ValueError("limit must be >= 1")
        table = _lookup_table(lookup)
        return await self._fetch_rows(
            lookup.statement(subject_id, limit), entity_type=table, operation="rule_rows"
        )

    async def search_rows(
        self,
        accessor: EntityAccessor,
        query: str | None,
        limit: int,
        offset: int = 0,
    ) -> FetchResult:
        """Case-insensitive substring match on any searchable field.

        A None query matches every row. Fields the model does not map are
        ignored; a type with no mapped searchable field matches nothing
        for a non-empty query.
        """
        model: Any = accessor.model
        stmt = select(model)
        if query:
            pattern = contains_pattern(query)
            columns = [
                getattr(model, name)
                for name in accessor.definition.searchable_fields
                if hasattr(model, name)
            ]
            if columns:
                stmt = stmt.where(
                    or_(*(col.ilike(pattern, escape=LIKE_ESCAPE_CHAR) for col in columns))
                )
            else:
                stmt = stmt.where(false())
        stmt = stmt.order_by(model.id).offset(offset).limit(limit)
        return await self._fetch_rows(
            stmt, entity_type=accessor.entity_type.value, operation="search"
        )


def _lookup_table(lookup: Any) -> str:
    """Table name of the rows a lookup returns (for fault context)."""
    if isinstance(lookup, ForeignKeyLookup):
        model = lookup.model
    elif isinstance(lookup, ParentLookup):
        model = lookup.parent_model
    elif isinstance(lookup, AssociationLookup):
        model = lookup.target_model
    else:
        raise TypeError(f"Unsupported lookup: {type(lookup).__name__}")
    return getattr(model, "__tablename__", model.__name__)
