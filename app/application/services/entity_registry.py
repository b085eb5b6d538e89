"""Entity registry: type tag -> (row source, transformer).

Built once (see app.infrastructure.persistence.entity_catalog) and passed
into the resolver at construction. Read-only for the process lifetime.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from app.application.dtos.entity import EntityReference
from app.domain.entity_definitions import EntityDefinition
from app.domain.enums import EntityType
from app.domain.exceptions import UnknownEntityTypeException


@dataclass(frozen=True)
class EntityAccessor:
    """Row source (ORM model) and projection for one entity type."""

    entity_type: EntityType
    model: type[Any]
    definition: EntityDefinition

    def to_reference(self, row: Any) -> EntityReference:
        """Project an already-fetched row into an EntityReference (no extra lookup)."""
        d = self.definition
        entity_id = row.id
        summary = {f: getattr(row, f, None) for f in d.display_fields}
        primary = summary.get(d.primary_field)
        label = str(primary) if primary not in (None, "") else f"{d.display_name} {entity_id}"
        return EntityReference(
            type=self.entity_type,
            id=entity_id,
            display_label=label,
            summary_fields=summary,
            url=d.url_for(entity_id),
            status=summary.get(d.status_field) if d.status_field else None,
            icon=d.icon,
        )


class EntityRegistry:
    """Immutable mapping of EntityType to EntityAccessor, in registration order."""

    def __init__(self, accessors: Iterable[EntityAccessor]) -> None:
        by_type: dict[EntityType, EntityAccessor] = {}
        for accessor in accessors:
            if accessor.entity_type in by_type:
                raise ValueError(
                    f"Duplicate registration for entity type {accessor.entity_type.value!r}"
                )
            by_type[accessor.entity_type] = accessor
        self._accessors: Mapping[EntityType, EntityAccessor] = MappingProxyType(by_type)

    def __contains__(self, entity_type: object) -> bool:
        return entity_type in self._accessors

    def types(self) -> tuple[EntityType, ...]:
        """Registered types in registration order."""
        return tuple(self._accessors)

    def resolve_type(self, entity_type: EntityType | str) -> EntityType:
        """Normalize a type tag; raise UnknownEntityTypeException if not registered."""
        try:
            resolved = EntityType(entity_type)
        except ValueError:
            raise UnknownEntityTypeException(str(entity_type)) from None
        if resolved not in self._accessors:
            raise UnknownEntityTypeException(resolved.value)
        return resolved

    def get_accessor(self, entity_type: EntityType | str) -> EntityAccessor:
        return self._accessors[self.resolve_type(entity_type)]
