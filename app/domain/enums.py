"""Domain enumerations for the entity relationship resolver.

Enums represent fixed sets of domain values: the entity types that take
part in the relationship graph, the relationship vocabulary, and rule
direction. Declaration order of EntityType is the registration order used
by cross-type search.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class EntityType(_ValuesMixin, str, Enum):
    """Business record shape participating in the relationship graph."""

    CLIENT = "client"
    CONTRACT = "contract"
    SERVICE_SCOPE = "service_scope"
    ASSET = "hardware_asset"
    SAF = "service_authorization_form"
    COC = "certificate_of_compliance"
    PROPOSAL = "proposal"
    DOCUMENT = "document"
    FINANCIAL_TRANSACTION = "financial_transaction"
    LICENSE_POOL = "license_pool"
    SERVICE = "service"
    USER = "user"
    AUDIT_LOG = "audit_log"


class RelationshipKind(_ValuesMixin, str, Enum):
    """Kind of a directed edge between two entities."""

    # Ownership / containment
    OWNS = "owns"
    BELONGS_TO = "belongs_to"
    CONTAINS = "contains"
    PART_OF = "part_of"

    # Process
    DEPENDS_ON = "depends_on"
    BLOCKS = "blocks"
    RELATES_TO = "relates_to"
    REFERENCES = "references"

    # Workflow
    CREATED_BY = "created_by"
    ASSIGNED_TO = "assigned_to"
    APPROVED_BY = "approved_by"
    ISSUED_FOR = "issued_for"

    # Documents
    ATTACHED_TO = "attached_to"
    SUPERSEDES = "supersedes"
    SUPERSEDED_BY = "superseded_by"

    # Financial
    PAID_FOR = "paid_for"
    INVOICED_TO = "invoiced_to"
    COSTS = "costs"

    # Service
    PROVIDES = "provides"
    USES = "uses"
    AUTHORIZES = "authorizes"
    COMPLIES_WITH = "complies_with"


class RuleDirection(_ValuesMixin, str, Enum):
    """Whether a rule discovers edges from the subject or toward it."""

    FORWARD = "forward"
    REVERSE = "reverse"
