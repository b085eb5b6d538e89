"""Application services: registry, rule table, and grouping."""

from app.application.services.entity_registry import EntityAccessor, EntityRegistry
from app.application.services.relationship_grouping import (
    group_relationships,
    kind_display_name,
)
from app.application.services.relationship_rules import (
    DEFAULT_STRENGTH,
    RelationshipRule,
    RelationshipRuleTable,
)

__all__ = [
    "DEFAULT_STRENGTH",
    "EntityAccessor",
    "EntityRegistry",
    "RelationshipRule",
    "RelationshipRuleTable",
    "group_relationships",
    "kind_display_name",
]
