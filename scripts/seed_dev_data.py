"""Seed a development database with a small linked record graph.

Creates all tables (if missing) and inserts one client with contracts,
scopes, a SAF, a COC, a hardware assignment, documents, proposals, and
transactions; then prints the client's relationship groups.

Usage:
    uv run python -m scripts.seed_dev_data

Requires: DATABASE_URL (e.g. postgresql+asyncpg://... or sqlite+aiosqlite:///dev.db).
"""

from __future__ import annotations

import asyncio
from datetime import date
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.composition import build_entity_relations_service
from app.core.config import get_settings
from app.domain.enums import EntityType
from app.infrastructure.persistence import database
from app.infrastructure.persistence.models import (
    CertificateOfCompliance,
    Client,
    ClientHardwareAssignment,
    Contract,
    Document,
    FinancialTransaction,
    HardwareAsset,
    Proposal,
    ServiceAuthorizationForm,
    ServiceScope,
)
from app.shared.telemetry.logging import setup_logging


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _seed(session: AsyncSession) -> int:
    """Insert the sample graph; return the client id. Skips if already seeded."""
    existing = await session.execute(select(Client).where(Client.name == "Acme Corp"))
    client = existing.scalar_one_or_none()
    if client is not None:
        return client.id

    client = Client(name="Acme Corp", industry="Manufacturing", status="active")
    session.add(client)
    await session.flush()

    contracts = [
        Contract(
            client_id=client.id,
            name="Managed Services 2025",
            status="active",
            start_date=date(2025, 1, 1),
            end_date=date(2025, 12, 31),
            total_value=Decimal("120000.00"),
        ),
        Contract(client_id=client.id, name="Security Audit", status="draft"),
    ]
    session.add_all(contracts)
    await session.flush()

    saf = ServiceAuthorizationForm(
        client_id=client.id,
        contract_id=contracts[0].id,
        saf_number="SAF-0001",
        description="Quarterly network maintenance",
        status="approved",
    )
    session.add(saf)
    await session.flush()

    asset = HardwareAsset(name="Core Switch", model="C9300", serial_number="FOC1234X")
    session.add(asset)
    await session.flush()

    session.add_all(
        [
            ServiceScope(
                contract_id=contracts[0].id, saf_id=saf.id, name="Network Monitoring"
            ),
            ServiceScope(contract_id=contracts[0].id, name="Helpdesk"),
            CertificateOfCompliance(
                client_id=client.id,
                saf_id=saf.id,
                certificate_number="COC-0001",
                compliance_type="ISO 27001",
            ),
            ClientHardwareAssignment(
                client_id=client.id, hardware_asset_id=asset.id, assigned_date=date.today()
            ),
            Proposal(
                contract_id=contracts[1].id,
                proposal_type="renewal",
                proposed_value=Decimal("15000.00"),
            ),
            FinancialTransaction(
                contract_id=contracts[0].id,
                description="January invoice",
                amount=Decimal("10000.00"),
                status="paid",
            ),
            Document(
                client_id=client.id,
                contract_id=contracts[0].id,
                name="Signed MSA.pdf",
                document_type="contract",
            ),
        ]
    )
    await session.commit()
    return client.id


async def main() -> None:
    _load_env()
    get_settings.cache_clear()
    setup_logging()
    async for session in database.get_db():
        async with database.engine.begin() as conn:
            await conn.run_sync(database.Base.metadata.create_all)
        client_id = await _seed(session)
        service = build_entity_relations_service(session)
        groups = await service.get_entity_relationships(EntityType.CLIENT, client_id)
        for group in groups:
            print(f"{group.display_name} ({group.count})")
            for rel in group.relationships:
                print(f"  {rel.counterpart.display_label} [{rel.id}]")
    await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
