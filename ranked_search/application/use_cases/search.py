"""Ranked full-text search use case.

One generic service serves every entity kind; the per-kind details live in
the TargetConfig passed to search().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ranked_search.application.dtos.search import SearchRequest, SearchResult
from ranked_search.application.services.term_sanitizer import TermSanitizer
from ranked_search.domain.exceptions import UnknownEntityKindException
from ranked_search.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from ranked_search.application.interfaces.search import (
        IQueryBuilder,
        IResultRehydrator,
        ISearchExecutor,
        ITermSanitizer,
    )
    from ranked_search.domain.value_objects import SearchTargetRegistry, TargetConfig


class SearchService:
    """Sanitize, rank, refetch, and return records in relevance order.

    Stateless across calls: concurrent searches share only the read-only
    TargetConfig and registry.
    """

    def __init__(
        self,
        executor: "ISearchExecutor",
        query_builder: "IQueryBuilder",
        rehydrator: "IResultRehydrator",
        sanitizer: "ITermSanitizer | None" = None,
        registry: "SearchTargetRegistry | None" = None,
        max_results: int | None = None,
    ) -> None:
        self.executor = executor
        self.query_builder = query_builder
        self.rehydrator = rehydrator
        self.sanitizer = sanitizer or TermSanitizer()
        self.registry = registry
        self.max_results = max_results

    def _effective_limit(self, requested: int | None) -> int | None:
        if self.max_results is None:
            return requested
        if requested is None:
            return self.max_results
        return min(requested, self.max_results)

    @traced("search.search")
    async def search(self, request: SearchRequest, cfg: "TargetConfig") -> SearchResult:
        """Run one search against cfg.

        An empty token set lists every record (store-default order,
        ranked=False). Zero hits returns an empty result without a refetch.

        Raises:
            StoreError: The store failed on any statement.
        """
        tokens = self.sanitizer.sanitize(request.raw_term)
        add_span_attributes(
            **{"search.entity_kind": cfg.entity_kind, "search.token_count": len(tokens)}
        )

        if tokens.is_empty:
            listing = self.query_builder.build_listing(cfg, scope=request.scope)
            rows = await self.executor.execute(listing)
            return SearchResult(
                entity_kind=cfg.entity_kind,
                records=tuple(cfg.to_record(row) for row in rows),
                ranked=False,
            )

        ranked = self.query_builder.build_ranked_search(
            tokens,
            cfg,
            scope=request.scope,
            limit=self._effective_limit(request.limit),
        )
        hits = await self.executor.fetch_hits(ranked)
        add_span_attributes(**{"search.hit_count": len(hits)})
        if not hits:
            return SearchResult.empty(cfg.entity_kind)

        records = await self.rehydrator.rehydrate(hits, cfg)
        return SearchResult(entity_kind=cfg.entity_kind, records=tuple(records))

    async def search_entities(
        self,
        raw_term: str | None,
        entity_kind: str,
        scope: Any = None,
        limit: int | None = None,
    ) -> SearchResult:
        """Resolve entity_kind in the registry and search it.

        Raises:
            UnknownEntityKindException: No target is configured for entity_kind.
            StoreError: The store failed on any statement.
        """
        cfg = self.registry.get(entity_kind) if self.registry is not None else None
        if cfg is None:
            raise UnknownEntityKindException(entity_kind)
        request = SearchRequest(
            raw_term=raw_term, entity_kind=entity_kind, scope=scope, limit=limit
        )
        return await self.search(request, cfg)
