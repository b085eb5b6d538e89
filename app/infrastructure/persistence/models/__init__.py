"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.audit_log import AuditLog
from app.infrastructure.persistence.models.certificate_of_compliance import (
    CertificateOfCompliance,
)
from app.infrastructure.persistence.models.client import Client
from app.infrastructure.persistence.models.contract import Contract
from app.infrastructure.persistence.models.document import Document
from app.infrastructure.persistence.models.financial_transaction import (
    FinancialTransaction,
)
from app.infrastructure.persistence.models.hardware_asset import (
    ClientHardwareAssignment,
    HardwareAsset,
)
from app.infrastructure.persistence.models.license_pool import LicensePool
from app.infrastructure.persistence.models.mixins import (
    EntityModel,
    IntegerIdMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.proposal import Proposal
from app.infrastructure.persistence.models.service import Service
from app.infrastructure.persistence.models.service_authorization_form import (
    ServiceAuthorizationForm,
)
from app.infrastructure.persistence.models.service_scope import ServiceScope
from app.infrastructure.persistence.models.user import User

__all__ = [
    "AuditLog",
    "CertificateOfCompliance",
    "Client",
    "ClientHardwareAssignment",
    "Contract",
    "Document",
    "FinancialTransaction",
    "HardwareAsset",
    "LicensePool",
    "Proposal",
    "Service",
    "ServiceAuthorizationForm",
    "ServiceScope",
    "User",
    "EntityModel",
    "IntegerIdMixin",
    "TimestampMixin",
]
