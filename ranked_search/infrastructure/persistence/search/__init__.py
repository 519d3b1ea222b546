"""MySQL full-text search: statement building, execution, rehydration."""

from ranked_search.infrastructure.persistence.search.executor import SearchExecutor
from ranked_search.infrastructure.persistence.search.query_builder import QueryBuilder
from ranked_search.infrastructure.persistence.search.rehydrator import (
    ResultRehydrator,
)
from ranked_search.infrastructure.persistence.search.targets import (
    DEFAULT_TARGETS,
    EVENTS,
    SUBJECTS,
    build_default_registry,
)

__all__ = [
    "DEFAULT_TARGETS",
    "EVENTS",
    "QueryBuilder",
    "ResultRehydrator",
    "SUBJECTS",
    "SearchExecutor",
    "build_default_registry",
]
