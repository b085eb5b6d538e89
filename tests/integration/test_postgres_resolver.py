"""Resolver smoke test against PostgreSQL. Requires DATABASE_URL; session is rolled back."""

import pytest

from app.core.composition import build_entity_relations_service
from app.domain.enums import EntityType, RelationshipKind
from app.infrastructure.persistence.models import Client, Contract


@pytest.mark.requires_db
async def test_client_contracts_on_postgres(pg_session) -> None:
    """Insert a client with two contracts (not committed) and resolve them."""
    client = Client(name="Postgres Smoke Client")
    pg_session.add(client)
    await pg_session.flush()
    pg_session.add_all(
        [
            Contract(client_id=client.id, name="Smoke A"),
            Contract(client_id=client.id, name="Smoke B"),
        ]
    )
    await pg_session.flush()

    svc = build_entity_relations_service(pg_session)
    groups = await svc.get_entity_relationships(EntityType.CLIENT, client.id)
    owns = next(g for g in groups if g.kind is RelationshipKind.OWNS)
    assert [r.target_entity.display_label for r in owns.relationships] == [
        "Smoke A",
        "Smoke B",
    ]
