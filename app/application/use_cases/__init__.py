"""Use cases: relationship resolution and cross-type search."""

from app.application.use_cases.entity_relations import EntityRelationsService
from app.application.use_cases.search import EntitySearchService

__all__ = ["EntityRelationsService", "EntitySearchService"]
