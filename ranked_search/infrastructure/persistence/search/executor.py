"""Search statement execution against the SQL store.

Pass-through to SQLAlchemy: one scoped connection per statement, released
on every exit path. Store failures surface as StoreError; no retry here.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ranked_search.application.dtos.search import RankedHit, Statement
from ranked_search.domain.exceptions import StoreError
from ranked_search.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class SearchExecutor:
    """Run search statements on an explicit AsyncEngine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    @traced("search.execute")
    async def execute(self, statement: Statement) -> list[dict[str, Any]]:
        """Execute statement and return rows as dicts, in store order.

        No-op statements return [] without acquiring a connection.

        Raises:
            StoreError: Connectivity, timeout, or malformed-statement failure.
        """
        if statement.is_noop:
            return []
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text(statement.sql), dict(statement.params))
                rows = [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as exc:
            logger.warning(
                "Search statement failed (%s): %s", type(exc).__name__, exc
            )
            raise StoreError(type(exc).__name__) from exc
        add_span_attributes(**{"search.row_count": len(rows)})
        return rows

    async def fetch_hits(self, statement: Statement) -> list[RankedHit]:
        """Execute a ranked statement and return (id, score) hits in row order."""
        rows = await self.execute(statement)
        return [
            RankedHit(id=row["id"], score=float(row["score"] or 0.0)) for row in rows
        ]
