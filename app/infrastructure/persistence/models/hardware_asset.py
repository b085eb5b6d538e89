"""Hardware asset ORM model and the client assignment link table."""

from datetime import date

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import EntityModel


class HardwareAsset(EntityModel, Base):
    """Hardware asset entity. Table: hardware_asset."""

    __tablename__ = "hardware_asset"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    model: Mapped[str | None] = mapped_column(String(255), nullable=True)
    serial_number: Mapped[str | None] = mapped_column(String(255), nullable=True)
    manufacturer: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="available")


class ClientHardwareAssignment(EntityModel, Base):
    """Client <-> hardware asset assignment. Table: client_hardware_assignment.

    Unique (client_id, hardware_asset_id).
    """

    __tablename__ = "client_hardware_assignment"

    client_id: Mapped[int] = mapped_column(
        ForeignKey("client.id", ondelete="CASCADE"), nullable=False, index=True
    )
    hardware_asset_id: Mapped[int] = mapped_column(
        ForeignKey("hardware_asset.id", ondelete="CASCADE"), nullable=False, index=True
    )
    assigned_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "client_id",
            "hardware_asset_id",
            name="uq_client_hardware_assignment_client_asset",
        ),
    )
