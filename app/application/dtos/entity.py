"""DTOs for entity references, resolved relationships, search, and stats (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.domain.enums import EntityType, RelationshipKind


@dataclass(frozen=True)
class EntityReference:
    """Normalized read-only snapshot of one stored record.

    (type, id) identifies the record. Built fresh on every fetch; mirrors
    the backing row at read time.
    """

    type: EntityType
    id: int
    display_label: str
    summary_fields: dict[str, Any] = field(default_factory=dict)
    url: str = ""
    status: Any = None
    icon: str | None = None

    @property
    def key(self) -> tuple[EntityType, int]:
        return (self.type, self.id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "id": self.id,
            "display_label": self.display_label,
            "summary_fields": dict(self.summary_fields),
            "url": self.url,
            "status": self.status,
            "icon": self.icon,
        }


def relationship_id(
    source: EntityReference, target: EntityReference, kind: RelationshipKind
) -> str:
    """Deterministic edge id: {srcType}:{srcId}->{tgtType}:{tgtId}:{kind}."""
    return (
        f"{source.type.value}:{source.id}->{target.type.value}:{target.id}:{kind.value}"
    )


@dataclass(frozen=True)
class Relationship:
    """One resolved edge between two entity references (computed per request, never stored)."""

    source_entity: EntityReference
    target_entity: EntityReference
    kind: RelationshipKind
    is_reverse: bool = False
    strength: int = 5

    @property
    def id(self) -> str:
        return relationship_id(self.source_entity, self.target_entity, self.kind)

    @property
    def counterpart(self) -> EntityReference:
        """The side that is not the subject: target for forward edges, source for reverse."""
        return self.source_entity if self.is_reverse else self.target_entity

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source_entity": self.source_entity.to_dict(),
            "target_entity": self.target_entity.to_dict(),
            "kind": self.kind.value,
            "is_reverse": self.is_reverse,
            "strength": self.strength,
        }


@dataclass
class RelationshipGroup:
    """All relationships of one kind for one subject entity, in encounter order."""

    kind: RelationshipKind
    display_name: str
    relationships: list[Relationship] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.relationships)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "display_name": self.display_name,
            "count": self.count,
            "relationships": [r.to_dict() for r in self.relationships],
        }


@dataclass(frozen=True)
class RelationshipOptions:
    """Filters applied to resolved relationships before grouping.

    include_kinds is an allow-list, exclude_kinds a deny-list, and limit a
    cap on the total number of relationships kept (after kind filtering).
    """

    include_kinds: frozenset[RelationshipKind] | None = None
    exclude_kinds: frozenset[RelationshipKind] | None = None
    limit: int | None = None

    def allows(self, kind: RelationshipKind) -> bool:
        if self.include_kinds is not None and kind not in self.include_kinds:
            return False
        if self.exclude_kinds is not None and kind in self.exclude_kinds:
            return False
        return True


@dataclass(frozen=True)
class EntitySearchParams:
    """Cross-type search input. limit None means the configured default."""

    query: str | None = None
    entity_types: tuple[EntityType | str, ...] | None = None
    limit: int | None = None
    offset: int = 0


@dataclass
class EntitySearchResult:
    """Cross-type search output.

    total is the number collected in this call, not a corpus-wide count.
    """

    entities: list[EntityReference]
    total: int
    has_more: bool


@dataclass
class RelationshipStats:
    """Relationship counts for one subject: overall and per kind."""

    total_relationships: int
    relationship_types: dict[RelationshipKind, int]
