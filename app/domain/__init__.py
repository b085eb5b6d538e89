"""Domain layer: entity definitions, enums, and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from app.domain.entity_definitions import ENTITY_DEFINITIONS, EntityDefinition
from app.domain.enums import EntityType, RelationshipKind, RuleDirection
from app.domain.exceptions import (
    EntityRelationsException,
    SqlNotConfiguredException,
    StorageFaultException,
    UnknownEntityTypeException,
    ValidationException,
)

__all__ = [
    # Definitions
    "ENTITY_DEFINITIONS",
    "EntityDefinition",
    # Enums
    "EntityType",
    "RelationshipKind",
    "RuleDirection",
    # Exceptions
    "EntityRelationsException",
    "SqlNotConfiguredException",
    "StorageFaultException",
    "UnknownEntityTypeException",
    "ValidationException",
]
