"""Search dependencies (composition root).

Endpoints get a fully wired SearchService from here; tests override
get_search_service via app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ranked_search.application.services.term_sanitizer import TermSanitizer
from ranked_search.application.use_cases.search import SearchService
from ranked_search.core.config import Settings, get_settings
from ranked_search.domain.exceptions import UnknownEntityKindException
from ranked_search.domain.value_objects import SearchTargetRegistry, TargetConfig
from ranked_search.infrastructure.persistence.database import get_engine
from ranked_search.infrastructure.persistence.search import (
    QueryBuilder,
    ResultRehydrator,
    SearchExecutor,
    build_default_registry,
)


def get_search_registry(request: Request) -> SearchTargetRegistry:
    """Registry built at startup; falls back to the defaults outside lifespan."""
    registry = getattr(request.app.state, "search_registry", None)
    if registry is None:
        registry = build_default_registry()
        request.app.state.search_registry = registry
    return registry


def get_search_target(
    entity_kind: str,
    registry: Annotated[SearchTargetRegistry, Depends(get_search_registry)],
) -> TargetConfig:
    """TargetConfig for the entity_kind path parameter.

    Resolved before the service so an unknown kind is a 404 even when the
    store is not configured.
    """
    cfg = registry.get(entity_kind)
    if cfg is None:
        raise UnknownEntityKindException(entity_kind)
    return cfg


def get_search_service(
    registry: Annotated[SearchTargetRegistry, Depends(get_search_registry)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchService:
    """SearchService over the shared engine.

    Raises SqlNotConfiguredException when DATABASE_URL is not set.
    """
    executor = SearchExecutor(get_engine())
    query_builder = QueryBuilder()
    return SearchService(
        executor=executor,
        query_builder=query_builder,
        rehydrator=ResultRehydrator(executor, query_builder),
        sanitizer=TermSanitizer(max_tokens=settings.search_max_tokens),
        registry=registry,
        max_results=settings.search_max_results,
    )
