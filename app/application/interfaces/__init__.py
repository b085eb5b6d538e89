"""Application interfaces (ports). Infrastructure implements these."""

from app.application.interfaces.repositories import IEntityRowRepository

__all__ = ["IEntityRowRepository"]
