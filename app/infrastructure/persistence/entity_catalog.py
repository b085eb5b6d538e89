"""Entity catalog: binds entity types to ORM models and declares the rule table.

Adding an entity type is one accessor entry; adding a relationship is one
rule entry. Both builders return immutable values; build them once at
startup and pass them to EntityRelationsService.
"""

from app.application.services.entity_registry import EntityAccessor, EntityRegistry
from app.application.services.relationship_rules import (
    DEFAULT_STRENGTH,
    RelationshipRule,
    RelationshipRuleTable,
)
from app.domain.entity_definitions import ENTITY_DEFINITIONS
from app.domain.enums import EntityType, RelationshipKind, RuleDirection
from app.infrastructure.persistence.lookups import (
    AssociationLookup,
    ForeignKeyLookup,
    ParentLookup,
)
from app.infrastructure.persistence.models import (
    AuditLog,
    CertificateOfCompliance,
    Client,
    ClientHardwareAssignment,
    Contract,
    Document,
    FinancialTransaction,
    HardwareAsset,
    LicensePool,
    Proposal,
    Service,
    ServiceAuthorizationForm,
    ServiceScope,
    User,
)

ENTITY_MODELS: dict[EntityType, type] = {
    EntityType.CLIENT: Client,
    EntityType.CONTRACT: Contract,
    EntityType.SERVICE_SCOPE: ServiceScope,
    EntityType.ASSET: HardwareAsset,
    EntityType.SAF: ServiceAuthorizationForm,
    EntityType.COC: CertificateOfCompliance,
    EntityType.PROPOSAL: Proposal,
    EntityType.DOCUMENT: Document,
    EntityType.FINANCIAL_TRANSACTION: FinancialTransaction,
    EntityType.LICENSE_POOL: LicensePool,
    EntityType.SERVICE: Service,
    EntityType.USER: User,
    EntityType.AUDIT_LOG: AuditLog,
}


def build_entity_registry() -> EntityRegistry:
    """Registry over every EntityType, in declaration order."""
    return EntityRegistry(
        EntityAccessor(
            entity_type=entity_type,
            model=ENTITY_MODELS[entity_type],
            definition=ENTITY_DEFINITIONS[entity_type],
        )
        for entity_type in EntityType
    )


def build_relationship_rules(
    default_strength: int = DEFAULT_STRENGTH,
) -> RelationshipRuleTable:
    """Forward and reverse rules for the business record graph."""
    fwd, rev = RuleDirection.FORWARD, RuleDirection.REVERSE
    owns = RelationshipKind.OWNS
    contains = RelationshipKind.CONTAINS
    authorizes = RelationshipKind.AUTHORIZES
    attached = RelationshipKind.ATTACHED_TO

    def rule(source, target, kind, direction, lookup, label):
        return RelationshipRule(
            source_type=source,
            target_type=target,
            kind=kind,
            direction=direction,
            lookup=lookup,
            label=label,
            strength=default_strength,
        )

    rules = [
        # Forward: subject -> what it owns / contains / authorizes / is attached to
        rule(
            EntityType.CLIENT, EntityType.CONTRACT, owns, fwd,
            ForeignKeyLookup(Contract, "client_id"), "Contracts",
        ),
        rule(
            EntityType.CLIENT, EntityType.ASSET, owns, fwd,
            AssociationLookup(
                HardwareAsset, ClientHardwareAssignment, "client_id", "hardware_asset_id"
            ),
            "Hardware Assets",
        ),
        rule(
            EntityType.CLIENT, EntityType.SAF, owns, fwd,
            ForeignKeyLookup(ServiceAuthorizationForm, "client_id"),
            "Service Authorization Forms",
        ),
        rule(
            EntityType.CLIENT, EntityType.COC, owns, fwd,
            ForeignKeyLookup(CertificateOfCompliance, "client_id"),
            "Certificates of Compliance",
        ),
        rule(
            EntityType.CONTRACT, EntityType.SERVICE_SCOPE, contains, fwd,
            ForeignKeyLookup(ServiceScope, "contract_id"), "Service Scopes",
        ),
        rule(
            EntityType.CONTRACT, EntityType.PROPOSAL, contains, fwd,
            ForeignKeyLookup(Proposal, "contract_id"), "Proposals",
        ),
        rule(
            EntityType.CONTRACT, EntityType.FINANCIAL_TRANSACTION, contains, fwd,
            ForeignKeyLookup(FinancialTransaction, "contract_id"), "Transactions",
        ),
        rule(
            EntityType.SAF, EntityType.COC, authorizes, fwd,
            ForeignKeyLookup(CertificateOfCompliance, "saf_id"),
            "Certificates of Compliance",
        ),
        rule(
            EntityType.SAF, EntityType.SERVICE_SCOPE, authorizes, fwd,
            ForeignKeyLookup(ServiceScope, "saf_id"), "Service Scopes",
        ),
        rule(
            EntityType.DOCUMENT, EntityType.CLIENT, attached, fwd,
            ParentLookup(Document, "client_id", Client), "Client",
        ),
        rule(
            EntityType.DOCUMENT, EntityType.CONTRACT, attached, fwd,
            ParentLookup(Document, "contract_id", Contract), "Contract",
        ),
        # Reverse: other record -> subject
        rule(
            EntityType.CONTRACT, EntityType.CLIENT, owns, rev,
            ParentLookup(Contract, "client_id", Client), "Client",
        ),
        rule(
            EntityType.SERVICE_SCOPE, EntityType.CONTRACT, contains, rev,
            ParentLookup(ServiceScope, "contract_id", Contract), "Contract",
        ),
        rule(
            EntityType.COC, EntityType.SAF, authorizes, rev,
            ParentLookup(CertificateOfCompliance, "saf_id", ServiceAuthorizationForm),
            "Service Authorization Form",
        ),
        rule(
            EntityType.COC, EntityType.CLIENT, owns, rev,
            ParentLookup(CertificateOfCompliance, "client_id", Client), "Client",
        ),
        rule(
            EntityType.SAF, EntityType.CLIENT, owns, rev,
            ParentLookup(ServiceAuthorizationForm, "client_id", Client), "Client",
        ),
        rule(
            EntityType.SERVICE_SCOPE, EntityType.SAF, authorizes, rev,
            ParentLookup(ServiceScope, "saf_id", ServiceAuthorizationForm),
            "Service Authorization Form",
        ),
        rule(
            EntityType.ASSET, EntityType.CLIENT, owns, rev,
            AssociationLookup(
                Client, ClientHardwareAssignment, "hardware_asset_id", "client_id"
            ),
            "Clients",
        ),
        rule(
            EntityType.PROPOSAL, EntityType.CONTRACT, contains, rev,
            ParentLookup(Proposal, "contract_id", Contract), "Contract",
        ),
        rule(
            EntityType.FINANCIAL_TRANSACTION, EntityType.CONTRACT, contains, rev,
            ParentLookup(FinancialTransaction, "contract_id", Contract), "Contract",
        ),
        rule(
            EntityType.CLIENT, EntityType.DOCUMENT, attached, rev,
            ForeignKeyLookup(Document, "client_id"), "Documents",
        ),
        rule(
            EntityType.CONTRACT, EntityType.DOCUMENT, attached, rev,
            ForeignKeyLookup(Document, "contract_id"), "Documents",
        ),
    ]
    return RelationshipRuleTable(rules, entity_types=EntityType)
