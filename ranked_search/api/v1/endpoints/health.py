"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from ranked_search.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()
