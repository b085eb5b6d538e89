"""Relationship rule table: declarative edge semantics per entity type.

A rule says: for a subject of source_type, executing lookup(subject_id)
yields rows of target_type related by kind, in the given direction. The
table is the single place these semantics are declared; the resolver
interprets it with one generic loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from app.domain.enums import EntityType, RelationshipKind, RuleDirection
from app.domain.exceptions import UnknownEntityTypeException

DEFAULT_STRENGTH = 5


@dataclass(frozen=True)
class RelationshipRule:
    """One edge declaration. lookup is interpreted by the row repository."""

    source_type: EntityType
    target_type: EntityType
    kind: RelationshipKind
    direction: RuleDirection
    lookup: Any
    label: str = ""
    strength: int = DEFAULT_STRENGTH

    def __post_init__(self) -> None:
        if not 1 <= self.strength <= 10:
            raise ValueError(f"Rule strength must be 1-10, got {self.strength}")

    def describe(self) -> str:
        """Short form for logs, e.g. 'client->contract:owns(forward)'."""
        return (
            f"{self.source_type.value}->{self.target_type.value}:"
            f"{self.kind.value}({self.direction.value})"
        )


class RelationshipRuleTable:
    """Immutable map of source type -> forward and reverse rules, in declaration order.

    entity_types lists every type the table knows; a known type with no
    rules yields an empty tuple, an unknown one raises
    UnknownEntityTypeException.
    """

    def __init__(
        self,
        rules: Iterable[RelationshipRule],
        entity_types: Iterable[EntityType],
    ) -> None:
        table: dict[tuple[EntityType, RuleDirection], list[RelationshipRule]] = {}
        known = tuple(entity_types)
        for rule in rules:
            if rule.source_type not in known:
                raise ValueError(
                    f"Rule {rule.describe()} declared for unregistered type"
                )
            table.setdefault((rule.source_type, rule.direction), []).append(rule)
        self._entity_types = frozenset(known)
        self._rules: Mapping[tuple[EntityType, RuleDirection], tuple[RelationshipRule, ...]] = (
            MappingProxyType({k: tuple(v) for k, v in table.items()})
        )

    def rules_for(
        self, entity_type: EntityType, direction: RuleDirection
    ) -> tuple[RelationshipRule, ...]:
        if entity_type not in self._entity_types:
            raise UnknownEntityTypeException(getattr(entity_type, "value", str(entity_type)))
        return self._rules.get((entity_type, direction), ())

    def forward_rules(self, entity_type: EntityType) -> tuple[RelationshipRule, ...]:
        return self.rules_for(entity_type, RuleDirection.FORWARD)

    def reverse_rules(self, entity_type: EntityType) -> tuple[RelationshipRule, ...]:
        return self.rules_for(entity_type, RuleDirection.REVERSE)

    def all_rules(self) -> tuple[RelationshipRule, ...]:
        return tuple(r for rules in self._rules.values() for r in rules)
