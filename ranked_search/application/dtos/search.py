"""DTOs for ranked full-text search (no dependency on ORM)."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

WILDCARD = "*"


@dataclass(frozen=True)
class SearchRequest:
    """One search call: raw user text, target entity kind, optional scope."""

    raw_term: str | None
    entity_kind: str
    scope: str | int | None = None
    limit: int | None = None


@dataclass(frozen=True)
class TokenSet:
    """Ordered, normalized search tokens, each carrying the wildcard marker.

    An empty TokenSet means "match everything"; it never holds empty strings.
    """

    tokens: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def as_boolean_query(self) -> str:
        """Tokens joined with single spaces (the bound term for MATCH ... AGAINST)."""
        return " ".join(self.tokens)


@dataclass(frozen=True)
class RankedHit:
    """Identifier and relevance score from the ranked-search statement."""

    id: Any
    score: float


@dataclass(frozen=True)
class Statement:
    """SQL text with named bound parameters.

    is_noop marks a statement that must not be sent to the store (e.g. a
    refetch over zero identifiers); executing it yields no rows.
    """

    sql: str
    params: Mapping[str, Any] = field(default_factory=dict)
    is_noop: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def noop(cls) -> "Statement":
        return cls(sql="", params={}, is_noop=True)


@dataclass(frozen=True)
class SearchResult:
    """Ordered records for one search.

    ranked is False for the match-all listing (empty token set), whose order
    is the store default.
    """

    entity_kind: str
    records: tuple[Any, ...] = ()
    ranked: bool = True

    def __iter__(self) -> Iterator[Any]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @classmethod
    def empty(cls, entity_kind: str) -> "SearchResult":
        return cls(entity_kind=entity_kind, records=(), ranked=True)
