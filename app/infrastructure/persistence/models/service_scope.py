"""Service scope ORM model. Part of a contract; may be authorized by a SAF."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import EntityModel


class ServiceScope(EntityModel, Base):
    """Service scope entity. Table: service_scope. Indexes: contract_id, saf_id."""

    __tablename__ = "service_scope"

    contract_id: Mapped[int | None] = mapped_column(
        ForeignKey("contract.id", ondelete="CASCADE"), nullable=True, index=True
    )
    saf_id: Mapped[int | None] = mapped_column(
        ForeignKey("service_authorization_form.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="active")
