"""Declarative row lookups used by relationship rules.

Each lookup names the tables and columns that connect a subject to its
related rows and builds the SELECT for one subject id. Rows come back
ordered by target id so repeated calls return the same sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, select


@dataclass(frozen=True)
class ForeignKeyLookup:
    """Rows of model whose foreign_key column equals the subject id.

    Example: contracts owned by a client (contract.client_id == client.id).
    """

    model: type[Any]
    foreign_key: str

    def statement(self, subject_id: int, limit: int) -> Select[Any]:
        fk = getattr(self.model, self.foreign_key)
        return (
            select(self.model)
            .where(fk == subject_id)
            .order_by(self.model.id)
            .limit(limit)
        )


@dataclass(frozen=True)
class ParentLookup:
    """The row of parent_model referenced by the subject's foreign_key column.

    Example: the client a contract belongs to (contract.client_id). A subject
    with a null foreign key yields no rows. Single joined query.
    """

    child_model: type[Any]
    foreign_key: str
    parent_model: type[Any]

    def statement(self, subject_id: int, limit: int) -> Select[Any]:
        fk = getattr(self.child_model, self.foreign_key)
        return (
            select(self.parent_model)
            .join(self.child_model, fk == self.parent_model.id)
            .where(self.child_model.id == subject_id)
            .order_by(self.parent_model.id)
            .limit(limit)
        )


@dataclass(frozen=True)
class AssociationLookup:
    """Rows of target_model linked to the subject through a link table.

    link_source holds the subject id, link_target the target id.
    Example: hardware assets assigned to a client via
    client_hardware_assignment (client_id -> hardware_asset_id).
    """

    target_model: type[Any]
    link_model: type[Any]
    link_source: str
    link_target: str

    def statement(self, subject_id: int, limit: int) -> Select[Any]:
        source_col = getattr(self.link_model, self.link_source)
        target_col = getattr(self.link_model, self.link_target)
        return (
            select(self.target_model)
            .join(self.link_model, target_col == self.target_model.id)
            .where(source_col == subject_id)
            .distinct()
            .order_by(self.target_model.id)
            .limit(limit)
        )


RowLookup = ForeignKeyLookup | ParentLookup | AssociationLookup
