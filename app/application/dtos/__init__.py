"""Application DTOs (no ORM dependency)."""

from app.application.dtos.entity import (
    EntityReference,
    EntitySearchParams,
    EntitySearchResult,
    Relationship,
    RelationshipGroup,
    RelationshipOptions,
    RelationshipStats,
    relationship_id,
)
from app.application.dtos.fetch_result import FetchErr, FetchOk, FetchResult

__all__ = [
    "EntityReference",
    "EntitySearchParams",
    "EntitySearchResult",
    "FetchErr",
    "FetchOk",
    "FetchResult",
    "Relationship",
    "RelationshipGroup",
    "RelationshipOptions",
    "RelationshipStats",
    "relationship_id",
]
