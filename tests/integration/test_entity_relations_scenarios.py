"""End-to-end resolver scenarios against SQLite (aiosqlite) through the real repository."""

import logging
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.application.dtos.entity import EntitySearchParams, RelationshipOptions
from app.application.use_cases.entity_relations import EntityRelationsService
from app.core.composition import build_entity_relations_service
from app.domain.enums import EntityType, RelationshipKind
from app.domain.exceptions import UnknownEntityTypeException
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


async def _seed(session: AsyncSession, *rows) -> None:
    session.add_all(rows)
    await session.commit()


def _kinds(groups) -> list[tuple[RelationshipKind, int]]:
    return [(g.kind, g.count) for g in groups]


@pytest.fixture
async def client_with_contracts(db_session: AsyncSession) -> None:
    """Client #5 owning three contracts and nothing else."""
    await _seed(
        db_session,
        Client(id=5, name="Acme Corp", industry="Retail", status="active"),
        Client(id=6, name="Globex", status="active"),
        Contract(id=1, client_id=5, name="Support", status="active"),
        Contract(id=2, client_id=5, name="Licensing", status="active"),
        Contract(id=3, client_id=5, name="Hardware", status="draft"),
        Contract(id=4, client_id=6, name="Globex deal", status="active"),
    )


async def test_scenario_a_client_owns_three_contracts(
    service: EntityRelationsService, client_with_contracts
) -> None:
    groups = await service.get_entity_relationships(EntityType.CLIENT, 5)
    assert _kinds(groups) == [(RelationshipKind.OWNS, 3)]
    rels = groups[0].relationships
    assert [r.target_entity.id for r in rels] == [1, 2, 3]
    assert all(r.source_entity.key == (EntityType.CLIENT, 5) for r in rels)
    assert rels[0].target_entity.display_label == "Support"
    assert rels[0].target_entity.url == "/contracts/1"


async def test_scenario_b_saf_authorizes_across_types(
    service: EntityRelationsService, db_session: AsyncSession
) -> None:
    await _seed(
        db_session,
        Client(id=5, name="Acme Corp"),
        ServiceAuthorizationForm(id=10, saf_number="SAF-10", status="approved"),
        CertificateOfCompliance(id=7, saf_id=10, certificate_number="COC-7"),
        CertificateOfCompliance(id=8, saf_id=10, certificate_number="COC-8"),
        ServiceScope(id=1, saf_id=10, name="Monitoring"),
    )
    groups = await service.get_entity_relationships(EntityType.SAF, 10)
    assert _kinds(groups) == [(RelationshipKind.AUTHORIZES, 3)]
    targets = [r.target_entity.key for r in groups[0].relationships]
    assert targets == [
        (EntityType.COC, 7),
        (EntityType.COC, 8),
        (EntityType.SERVICE_SCOPE, 1),
    ]


async def test_scenario_c_search_clients(
    service: EntityRelationsService, db_session: AsyncSession
) -> None:
    await _seed(
        db_session,
        Client(id=1, name="Acme Corp"),
        Client(id=2, name="Globex"),
        Client(id=3, name="Initech", description="Former ACME subsidiary"),
        Client(id=4, name="acme labs"),
        Contract(id=1, name="Acme contract"),
    )
    result = await service.search_entities(
        EntitySearchParams(query="acme", entity_types=(EntityType.CLIENT,), limit=5)
    )
    assert [e.id for e in result.entities] == [1, 3, 4]
    assert all(e.type is EntityType.CLIENT for e in result.entities)
    assert result.total == 3
    assert result.has_more is False


async def test_scenario_d_coc_reverse_groups(
    service: EntityRelationsService, db_session: AsyncSession
) -> None:
    await _seed(
        db_session,
        Client(id=5, name="Acme Corp"),
        ServiceAuthorizationForm(id=10, client_id=5, saf_number="SAF-10"),
        CertificateOfCompliance(id=7, saf_id=10, client_id=5, certificate_number="COC-7"),
    )
    groups = await service.get_entity_relationships(EntityType.COC, 7)
    assert _kinds(groups) == [
        (RelationshipKind.AUTHORIZES, 1),
        (RelationshipKind.OWNS, 1),
    ]
    authorized_by, owned_by = groups
    assert authorized_by.display_name == "Authorized By"
    assert owned_by.display_name == "Owned By"
    assert authorized_by.relationships[0].source_entity.key == (EntityType.SAF, 10)
    assert owned_by.relationships[0].source_entity.key == (EntityType.CLIENT, 5)
    assert all(r.is_reverse for g in groups for r in g.relationships)
    assert owned_by.relationships[0].id == "client:5->certificate_of_compliance:7:owns"


async def test_scenario_e_fault_on_asset_rule_is_isolated(
    service: EntityRelationsService,
    engine: AsyncEngine,
    client_with_contracts,
    caplog: pytest.LogCaptureFixture,
) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(ClientHardwareAssignment.__table__.drop)

    with caplog.at_level(logging.WARNING):
        groups = await service.get_entity_relationships(EntityType.CLIENT, 5)

    assert _kinds(groups) == [(RelationshipKind.OWNS, 3)]
    assert {r.target_entity.type for r in groups[0].relationships} == {
        EntityType.CONTRACT
    }
    assert "client->hardware_asset:owns(forward)" in caplog.text
    assert "client:5" in caplog.text


async def test_client_full_graph(
    service: EntityRelationsService, db_session: AsyncSession
) -> None:
    await _seed(
        db_session,
        Client(id=5, name="Acme Corp"),
        Contract(id=1, client_id=5, name="MSA"),
        HardwareAsset(id=3, name="Core Switch"),
        ClientHardwareAssignment(id=1, client_id=5, hardware_asset_id=3),
        ServiceAuthorizationForm(id=10, client_id=5, saf_number="SAF-10"),
        CertificateOfCompliance(id=7, client_id=5, certificate_number="COC-7"),
        Document(id=20, client_id=5, name="msa.pdf"),
        Document(id=21, client_id=5, contract_id=1, name="signed.pdf"),
    )
    groups = await service.get_entity_relationships(EntityType.CLIENT, 5)
    assert _kinds(groups) == [
        (RelationshipKind.OWNS, 4),
        (RelationshipKind.ATTACHED_TO, 2),
    ]
    owned = [r.target_entity.key for r in groups[0].relationships]
    assert owned == [
        (EntityType.CONTRACT, 1),
        (EntityType.ASSET, 3),
        (EntityType.SAF, 10),
        (EntityType.COC, 7),
    ]
    assert groups[1].display_name == "Attachments"

    stats = await service.get_relationship_stats(EntityType.CLIENT, 5)
    assert stats.total_relationships == sum(g.count for g in groups) == 6

    documents = await service.get_related_entities(EntityType.CLIENT, 5, "document")
    assert [d.id for d in documents] == [20, 21]


async def test_contract_forward_and_reverse(
    service: EntityRelationsService, db_session: AsyncSession
) -> None:
    await _seed(
        db_session,
        Client(id=5, name="Acme Corp"),
        Contract(id=1, client_id=5, name="MSA", total_value=Decimal("1000.00")),
        ServiceScope(id=1, contract_id=1, name="Helpdesk"),
        Proposal(id=1, contract_id=1, proposal_type="renewal"),
        FinancialTransaction(id=1, contract_id=1, description="Invoice 1", amount=Decimal("10")),
        FinancialTransaction(id=2, contract_id=1, description="Invoice 2", amount=Decimal("20")),
    )
    forward = await service.resolve_forward(EntityType.CONTRACT, 1)
    assert [r.target_entity.key for r in forward] == [
        (EntityType.SERVICE_SCOPE, 1),
        (EntityType.PROPOSAL, 1),
        (EntityType.FINANCIAL_TRANSACTION, 1),
        (EntityType.FINANCIAL_TRANSACTION, 2),
    ]
    reverse = await service.resolve_reverse(EntityType.CONTRACT, 1)
    assert [(r.source_entity.key, r.kind) for r in reverse] == [
        ((EntityType.CLIENT, 5), RelationshipKind.OWNS),
    ]

    parent = await service.get_related_entities(EntityType.PROPOSAL, 1, EntityType.CONTRACT)
    assert [p.display_label for p in parent] == ["MSA"]


async def test_asset_reverse_through_assignment(
    service: EntityRelationsService, db_session: AsyncSession
) -> None:
    await _seed(
        db_session,
        Client(id=5, name="Acme Corp"),
        Client(id=6, name="Globex"),
        HardwareAsset(id=3, name="Core Switch"),
        ClientHardwareAssignment(id=1, client_id=6, hardware_asset_id=3),
        ClientHardwareAssignment(id=2, client_id=5, hardware_asset_id=3),
    )
    rels = await service.resolve_reverse(EntityType.ASSET, 3)
    assert [r.source_entity.id for r in rels] == [5, 6]
    assert all(r.kind is RelationshipKind.OWNS for r in rels)


async def test_document_attached_to_parents(
    service: EntityRelationsService, db_session: AsyncSession
) -> None:
    await _seed(
        db_session,
        Client(id=5, name="Acme Corp"),
        Contract(id=1, client_id=5, name="MSA"),
        Document(id=20, client_id=5, contract_id=1, name="signed.pdf"),
        Document(id=21, name="orphan.pdf"),
    )
    groups = await service.get_entity_relationships(EntityType.DOCUMENT, 20)
    assert _kinds(groups) == [(RelationshipKind.ATTACHED_TO, 2)]
    assert groups[0].display_name == "Attached To"
    assert await service.get_entity_relationships(EntityType.DOCUMENT, 21) == []


async def test_missing_entity_yields_nothing(
    service: EntityRelationsService, client_with_contracts
) -> None:
    assert await service.get_entity(EntityType.CLIENT, 999) is None
    assert await service.get_entity(EntityType.CLIENT, -1) is None
    assert await service.get_entity_relationships(EntityType.CLIENT, 999) == []
    stats = await service.get_relationship_stats(EntityType.CLIENT, 999)
    assert stats.total_relationships == 0


async def test_unknown_type_raises(service: EntityRelationsService) -> None:
    with pytest.raises(UnknownEntityTypeException):
        await service.get_entity_relationships("spaceship", 1)


async def test_repeated_calls_are_identical(
    service: EntityRelationsService, client_with_contracts
) -> None:
    first = await service.get_entity_relationships(EntityType.CLIENT, 5)
    second = await service.get_entity_relationships(EntityType.CLIENT, 5)
    assert [g.to_dict() for g in first] == [g.to_dict() for g in second]


async def test_options_filter_and_limit(
    service: EntityRelationsService, client_with_contracts, db_session: AsyncSession
) -> None:
    await _seed(db_session, Document(id=20, client_id=5, name="msa.pdf"))
    only_docs = await service.get_entity_relationships(
        EntityType.CLIENT,
        5,
        RelationshipOptions(include_kinds=frozenset({RelationshipKind.ATTACHED_TO})),
    )
    assert _kinds(only_docs) == [(RelationshipKind.ATTACHED_TO, 1)]

    capped = await service.get_entity_relationships(
        EntityType.CLIENT, 5, RelationshipOptions(limit=2)
    )
    assert _kinds(capped) == [(RelationshipKind.OWNS, 2)]


async def test_row_limit_truncates_per_rule(
    db_session: AsyncSession, client_with_contracts, test_settings
) -> None:
    settings = test_settings.model_copy(update={"relationship_row_limit": 2})
    svc = build_entity_relations_service(db_session, settings)
    rels = await svc.resolve_forward(EntityType.CLIENT, 5)
    assert [r.target_entity.id for r in rels] == [1, 2]
