"""Entity relationship resolver: forward/reverse edges, grouping, stats, projection.

Interprets the relationship rule table with one generic loop. Every call
recomputes from the backing store; nothing is cached. Storage faults are
isolated to the rule (or lookup) that hit them: logged and skipped, so a
partial graph is returned rather than an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from app.application.dtos.entity import (
    EntityReference,
    EntitySearchParams,
    EntitySearchResult,
    Relationship,
    RelationshipGroup,
    RelationshipOptions,
    RelationshipStats,
)
from app.application.dtos.fetch_result import FetchErr
from app.application.services.relationship_grouping import group_relationships
from app.application.use_cases.search import EntitySearchService
from app.domain.enums import EntityType, RelationshipKind, RuleDirection
from app.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IEntityRowRepository
    from app.application.services.entity_registry import EntityRegistry
    from app.application.services.relationship_rules import (
        RelationshipRule,
        RelationshipRuleTable,
    )

logger = logging.getLogger(__name__)

DEFAULT_ROW_LIMIT = 50


class EntityRelationsService:
    """Resolve, group, and summarize relationships between stored entities.

    Registry and rule table are immutable values passed in at construction;
    the service holds no other state, so one instance may serve any number
    of calls (one row repository, i.e. one session, per instance).
    """

    def __init__(
        self,
        row_repo: "IEntityRowRepository",
        registry: "EntityRegistry",
        rules: "RelationshipRuleTable",
        *,
        row_limit: int = DEFAULT_ROW_LIMIT,
        search_service: EntitySearchService | None = None,
    ) -> None:
        if row_limit < 1:
            raise ValueError("row_limit must be >= 1")
        self.row_repo = row_repo
        self.registry = registry
        self.rules = rules
        self.row_limit = row_limit
        self.search_service = search_service or EntitySearchService(row_repo, registry)

    async def get_entity(
        self, entity_type: EntityType | str, entity_id: int
    ) -> EntityReference | None:
        """Return the entity, or None when no row matches or the store is unreachable.

        Raises:
            UnknownEntityTypeException: entity_type is not registered.
            ValidationException: entity_id is not an integer.
        """
        accessor = self.registry.get_accessor(entity_type)
        _validate_id(entity_id)
        result = await self.row_repo.fetch_by_id(accessor, entity_id)
        if isinstance(result, FetchErr):
            logger.warning(
                "Error fetching entity %s:%s: %s",
                accessor.entity_type.value,
                entity_id,
                result.fault.details.get("reason", result.fault.message),
            )
            return None
        if not result.rows:
            return None
        return accessor.to_reference(result.rows[0])

    async def resolve_forward(
        self, entity_type: EntityType | str, entity_id: int
    ) -> list[Relationship]:
        """Edges from the subject to what it owns, contains, authorizes, or is attached to."""
        et = self.registry.resolve_type(entity_type)
        return await self._resolve(et, entity_id, self.rules.forward_rules(et))

    async def resolve_reverse(
        self, entity_type: EntityType | str, entity_id: int
    ) -> list[Relationship]:
        """Edges other entities hold against the subject (subject is the target)."""
        et = self.registry.resolve_type(entity_type)
        return await self._resolve(et, entity_id, self.rules.reverse_rules(et))

    async def get_entity_relationships(
        self,
        entity_type: EntityType | str,
        entity_id: int,
        options: RelationshipOptions | None = None,
    ) -> list[RelationshipGroup]:
        """Forward then reverse relationships, filtered, grouped by kind.

        An entity with no relationships (or that does not exist) yields [].
        """
        options = options or RelationshipOptions()
        _validate_options(options)
        et = self.registry.resolve_type(entity_type)
        rules = self.rules.forward_rules(et) + self.rules.reverse_rules(et)
        active = [r for r in rules if options.allows(r.kind)]
        relationships = await self._resolve(et, entity_id, active)
        if options.limit is not None:
            relationships = relationships[: options.limit]
        return group_relationships(relationships)

    async def get_relationship_stats(
        self, entity_type: EntityType | str, entity_id: int
    ) -> RelationshipStats:
        """Total and per-kind relationship counts (aggregated from the groups)."""
        groups = await self.get_entity_relationships(entity_type, entity_id)
        return RelationshipStats(
            total_relationships=sum(g.count for g in groups),
            relationship_types={g.kind: g.count for g in groups},
        )

    async def get_related_entities(
        self,
        entity_type: EntityType | str,
        entity_id: int,
        related_type: EntityType | str,
        kind: RelationshipKind | str | None = None,
    ) -> list[EntityReference]:
        """Entities of related_type on the other side of the subject's relationships.

        De-duplicated by (type, id), first occurrence kept.
        """
        related = self.registry.resolve_type(related_type)
        options = None
        if kind is not None:
            options = RelationshipOptions(include_kinds=frozenset({_parse_kind(kind)}))
        groups = await self.get_entity_relationships(entity_type, entity_id, options)

        seen: set[tuple[EntityType, int]] = set()
        entities: list[EntityReference] = []
        for group in groups:
            for rel in group.relationships:
                other = rel.counterpart
                if other.type is not related or other.key in seen:
                    continue
                seen.add(other.key)
                entities.append(other)
        return entities

    async def search_entities(self, params: EntitySearchParams) -> EntitySearchResult:
        """Cross-type substring search (see EntitySearchService)."""
        return await self.search_service.search(params)

    async def _resolve(
        self,
        entity_type: EntityType,
        entity_id: int,
        rules: Iterable["RelationshipRule"],
    ) -> list[Relationship]:
        """Run rules sequentially, pairing the subject with every returned row."""
        _validate_id(entity_id)
        rules = list(rules)
        if not rules:
            return []
        subject = await self.get_entity(entity_type, entity_id)
        if subject is None:
            logger.debug(
                "No relationships for %s:%s: entity not found",
                entity_type.value,
                entity_id,
            )
            return []

        relationships: list[Relationship] = []
        for rule in rules:
            relationships.extend(await self._apply_rule(subject, rule))
        return relationships

    async def _apply_rule(
        self, subject: EntityReference, rule: "RelationshipRule"
    ) -> list[Relationship]:
        target_accessor = self.registry.get_accessor(rule.target_type)
        result = await self.row_repo.fetch_lookup_rows(
            rule.lookup, subject.id, self.row_limit
        )
        if isinstance(result, FetchErr):
            logger.warning(
                "Relationship rule %s skipped for %s:%s: %s",
                rule.describe(),
                subject.type.value,
                subject.id,
                result.fault.details.get("reason", result.fault.message),
            )
            return []
        if len(result.rows) >= self.row_limit:
            logger.debug(
                "Relationship rule %s for %s:%s truncated at %d rows",
                rule.describe(),
                subject.type.value,
                subject.id,
                self.row_limit,
            )

        is_reverse = rule.direction is RuleDirection.REVERSE
        relationships = []
        for row in result.rows:
            other = target_accessor.to_reference(row)
            source, target = (other, subject) if is_reverse else (subject, other)
            relationships.append(
                Relationship(
                    source_entity=source,
                    target_entity=target,
                    kind=rule.kind,
                    is_reverse=is_reverse,
                    strength=rule.strength,
                )
            )
        return relationships


def _validate_id(entity_id: int) -> None:
    if isinstance(entity_id, bool) or not isinstance(entity_id, int):
        raise ValidationException("Entity id must be an integer", field="entity_id")


def _validate_options(options: RelationshipOptions) -> None:
    if options.limit is not None and options.limit < 0:
        raise ValidationException("limit must be >= 0", field="limit")


def _parse_kind(kind: RelationshipKind | str) -> RelationshipKind:
    try:
        return RelationshipKind(kind)
    except ValueError:
        raise ValidationException(
            f"Unknown relationship kind: {kind}", field="kind"
        ) from None
