"""Composition root: builds EntityRelationsService from infrastructure.

Registry and rule table are built once per process (cached) and shared by
every service instance; each service gets its own session-bound row
repository.
"""

from __future__ import annotations

from contextlib import aclosing, asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.entity_registry import EntityRegistry
from app.application.services.relationship_rules import RelationshipRuleTable
from app.application.use_cases.entity_relations import EntityRelationsService
from app.application.use_cases.search import EntitySearchService
from app.core.config import Settings, get_settings
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.entity_catalog import (
    build_entity_registry,
    build_relationship_rules,
)
from app.infrastructure.persistence.repositories.entity_row_repo import (
    EntityRowRepository,
)


@lru_cache
def get_entity_registry() -> EntityRegistry:
    return build_entity_registry()


@lru_cache
def get_relationship_rules(default_strength: int) -> RelationshipRuleTable:
    return build_relationship_rules(default_strength=default_strength)


def build_entity_relations_service(
    db: AsyncSession, settings: Settings | None = None
) -> EntityRelationsService:
    """Wire the resolver for one session using configured limits."""
    settings = settings or get_settings()
    row_repo = EntityRowRepository(db)
    registry = get_entity_registry()
    search_service = EntitySearchService(
        row_repo,
        registry,
        default_limit=settings.search_default_limit,
        per_type_limit=settings.search_per_type_limit,
        max_limit=settings.search_max_limit,
    )
    return EntityRelationsService(
        row_repo,
        registry,
        get_relationship_rules(settings.relationship_default_strength),
        row_limit=settings.relationship_row_limit,
        search_service=search_service,
    )


@asynccontextmanager
async def entity_relations_session(
    settings: Settings | None = None,
) -> AsyncIterator[EntityRelationsService]:
    """Open a read-only session and yield a service bound to it.

    Raises SqlNotConfiguredException when DATABASE_URL is not set.
    """
    async with aclosing(get_db()) as sessions:
        async for db in sessions:
            yield build_entity_relations_service(db, settings)
