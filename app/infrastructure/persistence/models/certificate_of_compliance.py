"""Certificate of compliance (COC) ORM model. Issued for a client, authorized by a SAF."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import EntityModel


class CertificateOfCompliance(EntityModel, Base):
    """COC entity. Table: certificate_of_compliance. Indexes: client_id, saf_id."""

    __tablename__ = "certificate_of_compliance"

    client_id: Mapped[int | None] = mapped_column(
        ForeignKey("client.id", ondelete="SET NULL"), nullable=True, index=True
    )
    saf_id: Mapped[int | None] = mapped_column(
        ForeignKey("service_authorization_form.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    certificate_number: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    compliance_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="active")
