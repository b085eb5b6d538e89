"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.entity_row_repo import (
    EntityRowRepository,
)

__all__ = [
    "BaseRepository",
    "EntityRowRepository",
]
