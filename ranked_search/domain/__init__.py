"""Domain layer: value objects and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from ranked_search.domain.exceptions import (
    InvalidInputException,
    RankedSearchException,
    SqlNotConfiguredException,
    StoreError,
    UnknownEntityKindException,
)
from ranked_search.domain.value_objects import SearchTargetRegistry, TargetConfig

__all__ = [
    "InvalidInputException",
    "RankedSearchException",
    "SearchTargetRegistry",
    "SqlNotConfiguredException",
    "StoreError",
    "TargetConfig",
    "UnknownEntityKindException",
]
