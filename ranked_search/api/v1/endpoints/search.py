"""Search API: ranked full-text search per entity kind."""

import dataclasses
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from ranked_search.api.v1.dependencies import (
    get_search_registry,
    get_search_service,
    get_search_target,
)
from ranked_search.application.dtos.search import SearchRequest
from ranked_search.application.use_cases.search import SearchService
from ranked_search.core.config import Settings, get_settings
from ranked_search.domain.value_objects import SearchTargetRegistry, TargetConfig
from ranked_search.schemas.search import SearchResponse, SearchTargetsResponse

router = APIRouter()


def _record_to_dict(record: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return dataclasses.asdict(record)
    return dict(record)


@router.get("", response_model=SearchTargetsResponse)
def list_search_targets(
    registry: Annotated[SearchTargetRegistry, Depends(get_search_registry)],
) -> SearchTargetsResponse:
    """Entity kinds available for search."""
    return SearchTargetsResponse(entity_kinds=registry.kinds())


@router.get("/{entity_kind}", response_model=SearchResponse)
async def search(
    target: Annotated[TargetConfig, Depends(get_search_target)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    settings: Annotated[Settings, Depends(get_settings)],
    q: str | None = Query(None, max_length=500, description="Search text; empty lists all"),
    scope: str | None = Query(
        None, max_length=64, description="Scope id (e.g. tenant); empty means unscoped"
    ),
    limit: int | None = Query(
        None, ge=1, description="Maximum ranked hits; the match-all listing is not limited"
    ),
) -> SearchResponse:
    """Relevance-ranked records of entity_kind matching q.

    An empty or missing q returns every record (unranked). Without scope,
    scoped kinds such as subjects and events search across all tenants;
    callers that must stay inside one tenant pass scope.
    """
    request = SearchRequest(
        raw_term=q,
        entity_kind=target.entity_kind,
        scope=scope or None,
        limit=limit or settings.search_default_limit,
    )
    result = await search_svc.search(request, target)
    return SearchResponse(
        entity_kind=result.entity_kind,
        ranked=result.ranked,
        count=len(result),
        results=[_record_to_dict(r) for r in result],
    )
