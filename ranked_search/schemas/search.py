"""Search API schemas."""

from typing import Any

from pydantic import BaseModel, Field


class SearchResponse(BaseModel):
    """Ranked search response for one entity kind."""

    entity_kind: str
    ranked: bool = Field(
        ..., description="False when the query was empty and every record is listed"
    )
    count: int
    results: list[dict[str, Any]]


class SearchTargetsResponse(BaseModel):
    """Entity kinds that can be searched."""

    entity_kinds: list[str]
