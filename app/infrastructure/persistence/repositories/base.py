"""Base repository: read helpers shared by row repositories.

Storage errors are converted to FetchErr values here (after rolling back
the session) so callers never see a raised SQLAlchemyError.
"""

import logging
from typing import Any

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.fetch_result import FetchErr, FetchOk, FetchResult
from app.domain.exceptions import StorageFaultException

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base repository holding the session and the guarded execute helper.

    Read-only: never flushes or commits.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _fetch_rows(
        self, stmt: Select[Any], *, entity_type: str, operation: str
    ) -> FetchResult:
        """Execute stmt and return its scalars, or the storage fault."""
        try:
            result = await self.db.execute(stmt)
            return FetchOk(rows=list(result.scalars().all()))
        except SQLAlchemyError as e:
            await self._rollback_quietly()
            return FetchErr(StorageFaultException(entity_type, operation, str(e)))

    async def _rollback_quietly(self) -> None:
        """Roll back after a failed statement so the session stays usable."""
        try:
            await self.db.rollback()
        except SQLAlchemyError as e:
            logger.warning("Rollback after storage fault failed: %s", e)
