"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the row repository interface.
"""

from app.application.interfaces import IEntityRowRepository
from app.application.services.entity_registry import EntityAccessor, EntityRegistry
from app.application.services.relationship_rules import (
    RelationshipRule,
    RelationshipRuleTable,
)
from app.application.use_cases.entity_relations import EntityRelationsService
from app.application.use_cases.search import EntitySearchService

__all__ = [
    "EntityAccessor",
    "EntityRegistry",
    "EntityRelationsService",
    "EntitySearchService",
    "IEntityRowRepository",
    "RelationshipRule",
    "RelationshipRuleTable",
]
