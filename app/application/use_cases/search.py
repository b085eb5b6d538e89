"""Cross-type entity search use case. Delegates row matching to IEntityRowRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.entity import EntitySearchParams, EntitySearchResult
from app.application.dtos.fetch_result import FetchErr
from app.domain.enums import EntityType
from app.domain.exceptions import ValidationException
from app.shared.utils.sanitization import normalize_query

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IEntityRowRepository
    from app.application.services.entity_registry import EntityRegistry

logger = logging.getLogger(__name__)


class EntitySearchService:
    """Substring search across entity types, merged and capped at a result limit.

    Types are visited in registration order (or the requested order). Each
    type contributes at most per_type_limit rows per call so results stay
    broad across types; offset only applies to the first type visited.
    """

    def __init__(
        self,
        row_repo: "IEntityRowRepository",
        registry: "EntityRegistry",
        *,
        default_limit: int = 20,
        per_type_limit: int = 10,
        max_limit: int = 100,
    ) -> None:
        self.row_repo = row_repo
        self.registry = registry
        self.default_limit = default_limit
        self.per_type_limit = per_type_limit
        self.max_limit = max_limit

    async def search(self, params: EntitySearchParams) -> EntitySearchResult:
        """Search entities. total is the count collected here, not a global count."""
        limit = self._effective_limit(params)
        entity_types = self._resolve_types(params.entity_types)
        query = normalize_query(params.query)

        entities = []
        for index, entity_type in enumerate(entity_types):
            remaining = limit - len(entities)
            if remaining <= 0:
                break
            accessor = self.registry.get_accessor(entity_type)
            result = await self.row_repo.search_rows(
                accessor,
                query,
                min(remaining, self.per_type_limit),
                params.offset if index == 0 else 0,
            )
            if isinstance(result, FetchErr):
                logger.warning(
                    "Search skipped type %s (query=%r): %s",
                    entity_type.value,
                    query,
                    result.fault.details.get("reason", result.fault.message),
                )
                continue
            entities.extend(accessor.to_reference(row) for row in result.rows)

        entities = entities[:limit]
        return EntitySearchResult(
            entities=entities,
            total=len(entities),
            has_more=limit > 0 and len(entities) == limit,
        )

    def _effective_limit(self, params: EntitySearchParams) -> int:
        if params.offset < 0:
            raise ValidationException("offset must be >= 0", field="offset")
        if params.limit is None:
            return min(self.default_limit, self.max_limit)
        if params.limit < 0:
            raise ValidationException("limit must be >= 0", field="limit")
        return min(params.limit, self.max_limit)

    def _resolve_types(
        self, requested: tuple[EntityType | str, ...] | None
    ) -> list[EntityType]:
        """Requested types (deduplicated, order kept) or all registered types."""
        if requested is None:
            return list(self.registry.types())
        resolved: list[EntityType] = []
        for t in requested:
            et = self.registry.resolve_type(t)
            if et not in resolved:
                resolved.append(et)
        return resolved
