"""Domain value objects and shared value types."""

from ranked_search.domain.value_objects.search import (
    SCOPE_PARAM,
    SearchTargetRegistry,
    TargetConfig,
)

__all__ = [
    "SCOPE_PARAM",
    "SearchTargetRegistry",
    "TargetConfig",
]
