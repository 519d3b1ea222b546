"""Application DTOs (no ORM dependency)."""

from ranked_search.application.dtos.records import EventRecord, SubjectRecord
from ranked_search.application.dtos.search import (
    WILDCARD,
    RankedHit,
    SearchRequest,
    SearchResult,
    Statement,
    TokenSet,
)

__all__ = [
    "WILDCARD",
    "EventRecord",
    "RankedHit",
    "SearchRequest",
    "SearchResult",
    "Statement",
    "SubjectRecord",
    "TokenSet",
]
