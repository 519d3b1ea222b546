"""API request/response schemas (pydantic)."""

from ranked_search.schemas.health import HealthResponse
from ranked_search.schemas.search import SearchResponse, SearchTargetsResponse

__all__ = ["HealthResponse", "SearchResponse", "SearchTargetsResponse"]
