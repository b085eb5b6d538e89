"""Proposal ORM model. Contained in a contract."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import EntityModel


class Proposal(EntityModel, Base):
    """Proposal entity. Table: proposal. proposal_type is stored in column 'type'."""

    __tablename__ = "proposal"

    contract_id: Mapped[int | None] = mapped_column(
        ForeignKey("contract.id", ondelete="CASCADE"), nullable=True, index=True
    )
    proposal_type: Mapped[str] = mapped_column("type", String(50), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    proposed_value: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="draft")
