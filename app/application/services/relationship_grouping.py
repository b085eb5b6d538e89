"""Group resolved relationships by kind for presentation."""

from __future__ import annotations

from typing import Iterable

from app.application.dtos.entity import Relationship, RelationshipGroup
from app.domain.enums import RelationshipKind

# (forward label, reverse label) per kind; other kinds fall back to title case.
_KIND_LABELS: dict[RelationshipKind, tuple[str, str]] = {
    RelationshipKind.OWNS: ("Owns", "Owned By"),
    RelationshipKind.CONTAINS: ("Contains", "Part Of"),
    RelationshipKind.AUTHORIZES: ("Authorizes", "Authorized By"),
    RelationshipKind.ATTACHED_TO: ("Attached To", "Attachments"),
    RelationshipKind.USES: ("Uses", "Used By"),
}


def kind_display_name(kind: RelationshipKind, is_reverse: bool = False) -> str:
    """Human label for a kind, e.g. owns -> 'Owns' / 'Owned By'."""
    labels = _KIND_LABELS.get(kind)
    if labels:
        return labels[1] if is_reverse else labels[0]
    return " ".join(word.capitalize() for word in kind.value.split("_"))


def group_relationships(
    relationships: Iterable[Relationship],
) -> list[RelationshipGroup]:
    """Partition by kind, keeping encounter order inside each group.

    Groups are ordered by count descending; equal counts keep the order in
    which their kind was first seen. The display name follows the first
    relationship of the group.
    """
    groups: dict[RelationshipKind, RelationshipGroup] = {}
    for rel in relationships:
        group = groups.get(rel.kind)
        if group is None:
            group = RelationshipGroup(
                kind=rel.kind,
                display_name=kind_display_name(rel.kind, rel.is_reverse),
            )
            groups[rel.kind] = group
        group.relationships.append(rel)
    return sorted(groups.values(), key=lambda g: g.count, reverse=True)
