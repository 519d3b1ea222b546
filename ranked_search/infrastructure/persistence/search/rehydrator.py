"""Rank-preserving rehydration of search hits into domain records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ranked_search.application.dtos.search import RankedHit
from ranked_search.domain.value_objects.search import TargetConfig
from ranked_search.infrastructure.persistence.search.query_builder import QueryBuilder

if TYPE_CHECKING:
    from ranked_search.application.interfaces.search import ISearchExecutor

logger = logging.getLogger(__name__)


class ResultRehydrator:
    """Refetch full rows for ranked hits and return records in hit order.

    The refetch statement already orders by position; the in-memory pass
    below restores the hit order regardless, keeps duplicate hits, and drops
    identifiers the refetch no longer finds (e.g. concurrently deleted).
    """

    def __init__(
        self,
        executor: "ISearchExecutor",
        query_builder: QueryBuilder | None = None,
    ) -> None:
        self.executor = executor
        self.query_builder = query_builder or QueryBuilder()

    async def rehydrate(
        self, hits: Sequence[RankedHit], cfg: TargetConfig
    ) -> list[Any]:
        ids = [hit.id for hit in hits]
        if not ids:
            return []

        unique_ids = list(dict.fromkeys(ids))
        statement = self.query_builder.build_refetch(unique_ids, cfg)
        rows = await self.executor.execute(statement)

        by_id: dict[Any, dict[str, Any]] = {}
        for row in rows:
            by_id.setdefault(row[cfg.id_column], row)

        records = [cfg.to_record(by_id[i]) for i in ids if i in by_id]
        if len(records) < len(ids):
            logger.debug(
                "Dropped %d of %d %s hits missing on refetch",
                len(ids) - len(records),
                len(ids),
                cfg.entity_kind,
            )
        return records
