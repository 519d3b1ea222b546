"""Search ports: protocols the use case depends on (DIP).

Infrastructure implements these; the use case never imports SQLAlchemy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ranked_search.application.dtos.search import (
        RankedHit,
        Statement,
        TokenSet,
    )
    from ranked_search.domain.value_objects import TargetConfig


class ITermSanitizer(Protocol):
    """Protocol for turning raw user text into search tokens."""

    def sanitize(self, raw: str | None) -> "TokenSet":
        """Return a (possibly empty) token set. Never raises."""


class IQueryBuilder(Protocol):
    """Protocol for rendering parameterized search statements."""

    def build_ranked_search(
        self,
        tokens: "TokenSet",
        cfg: "TargetConfig",
        scope: Any = None,
        limit: int | None = None,
    ) -> "Statement":
        """Ranked statement selecting (id, score), score descending."""

    def build_refetch(self, ids: Sequence[Any], cfg: "TargetConfig") -> "Statement":
        """Statement fetching full rows for ids, in the order of ids."""

    def build_listing(self, cfg: "TargetConfig", scope: Any = None) -> "Statement":
        """Unranked listing of every row for cfg (store-default order)."""


class ISearchExecutor(Protocol):
    """Protocol for running a statement against the store."""

    async def execute(self, statement: "Statement") -> list[dict[str, Any]]:
        """Return rows as dicts. Raises StoreError on store failure."""

    async def fetch_hits(self, statement: "Statement") -> list["RankedHit"]:
        """Run a ranked statement and return its hits in row order."""


class IResultRehydrator(Protocol):
    """Protocol for turning ranked hits into ordered domain records."""

    async def rehydrate(
        self, hits: Sequence["RankedHit"], cfg: "TargetConfig"
    ) -> list[Any]:
        """Return records in the order of hits; missing ids are dropped."""
