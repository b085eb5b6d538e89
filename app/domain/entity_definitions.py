"""Per-type entity definitions: display, status, and searchable fields.

Field names are attribute names on the stored rows. A definition drives
how a raw row is projected into an EntityReference and which columns
cross-type search matches against.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from app.domain.enums import EntityType


@dataclass(frozen=True)
class EntityDefinition:
    """Static description of one entity type (display and search metadata)."""

    type: EntityType
    display_name: str
    plural_name: str
    icon: str
    url_path: str
    primary_field: str
    searchable_fields: tuple[str, ...]
    secondary_field: str | None = None
    status_field: str | None = None

    @property
    def display_fields(self) -> tuple[str, ...]:
        """Fields copied into EntityReference.summary_fields (primary, secondary, status)."""
        fields = [self.primary_field]
        for f in (self.secondary_field, self.status_field):
            if f and f not in fields:
                fields.append(f)
        return tuple(fields)

    def url_for(self, entity_id: int) -> str:
        """Return the admin UI path of one record (e.g. /clients/5)."""
        return f"{self.url_path}/{entity_id}"


_DEFINITIONS: tuple[EntityDefinition, ...] = (
    EntityDefinition(
        type=EntityType.CLIENT,
        display_name="Client",
        plural_name="Clients",
        icon="Building",
        url_path="/clients",
        primary_field="name",
        secondary_field="industry",
        status_field="status",
        searchable_fields=("name", "industry", "address", "description"),
    ),
    EntityDefinition(
        type=EntityType.CONTRACT,
        display_name="Contract",
        plural_name="Contracts",
        icon="FileText",
        url_path="/contracts",
        primary_field="name",
        secondary_field="total_value",
        status_field="status",
        searchable_fields=("name", "notes"),
    ),
    EntityDefinition(
        type=EntityType.SERVICE_SCOPE,
        display_name="Service Scope",
        plural_name="Service Scopes",
        icon="Settings",
        url_path="/service-scopes",
        primary_field="name",
        secondary_field="description",
        status_field="status",
        searchable_fields=("name", "description"),
    ),
    EntityDefinition(
        type=EntityType.ASSET,
        display_name="Hardware Asset",
        plural_name="Hardware Assets",
        icon="Monitor",
        url_path="/assets",
        primary_field="name",
        secondary_field="model",
        status_field="status",
        searchable_fields=("name", "model", "serial_number", "manufacturer"),
    ),
    EntityDefinition(
        type=EntityType.SAF,
        display_name="Service Authorization Form",
        plural_name="Service Authorization Forms",
        icon="Shield",
        url_path="/safs",
        primary_field="saf_number",
        secondary_field="description",
        status_field="status",
        searchable_fields=("saf_number", "description", "scope"),
    ),
    EntityDefinition(
        type=EntityType.COC,
        display_name="Certificate of Compliance",
        plural_name="Certificates of Compliance",
        icon="Award",
        url_path="/cocs",
        primary_field="certificate_number",
        secondary_field="description",
        status_field="status",
        searchable_fields=("certificate_number", "description", "compliance_type"),
    ),
    EntityDefinition(
        type=EntityType.PROPOSAL,
        display_name="Proposal",
        plural_name="Proposals",
        icon="FileCheck",
        url_path="/proposals",
        primary_field="proposal_type",
        secondary_field="proposed_value",
        status_field="status",
        searchable_fields=("proposal_type", "notes"),
    ),
    EntityDefinition(
        type=EntityType.DOCUMENT,
        display_name="Document",
        plural_name="Documents",
        icon="File",
        url_path="/documents",
        primary_field="name",
        secondary_field="document_type",
        status_field="is_active",
        searchable_fields=("name", "description", "document_type"),
    ),
    EntityDefinition(
        type=EntityType.FINANCIAL_TRANSACTION,
        display_name="Financial Transaction",
        plural_name="Financial Transactions",
        icon="DollarSign",
        url_path="/transactions",
        primary_field="description",
        secondary_field="amount",
        status_field="status",
        searchable_fields=("description", "reference", "category"),
    ),
    EntityDefinition(
        type=EntityType.LICENSE_POOL,
        display_name="License Pool",
        plural_name="License Pools",
        icon="Key",
        url_path="/license-pools",
        primary_field="name",
        secondary_field="total_licenses",
        status_field="status",
        searchable_fields=("name", "description", "vendor"),
    ),
    EntityDefinition(
        type=EntityType.SERVICE,
        display_name="Service",
        plural_name="Services",
        icon="Cog",
        url_path="/services",
        primary_field="name",
        secondary_field="category",
        status_field="is_active",
        searchable_fields=("name", "description", "category"),
    ),
    EntityDefinition(
        type=EntityType.USER,
        display_name="User",
        plural_name="Users",
        icon="User",
        url_path="/users",
        primary_field="name",
        secondary_field="email",
        status_field="is_active",
        searchable_fields=("name", "email", "role"),
    ),
    EntityDefinition(
        type=EntityType.AUDIT_LOG,
        display_name="Audit Log",
        plural_name="Audit Logs",
        icon="History",
        url_path="/audit-logs",
        primary_field="action",
        secondary_field="entity_type",
        searchable_fields=("action", "entity_type", "details"),
    ),
)

ENTITY_DEFINITIONS: Mapping[EntityType, EntityDefinition] = MappingProxyType(
    {d.type: d for d in _DEFINITIONS}
)
