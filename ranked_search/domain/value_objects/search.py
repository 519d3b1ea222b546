"""Search target value object.

A TargetConfig describes one searchable entity kind: which table to read,
which columns carry the full-text index, and how a row becomes a record.
It is built once at startup and shared read-only by every search.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# Table and column names are interpolated into SQL text, so only plain
# identifiers are accepted.
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

SCOPE_PARAM = "scope"


def _validate_identifier(value: str, field_name: str) -> None:
    """Raise ValueError unless value is a plain SQL identifier."""
    if not isinstance(value, str) or not _IDENTIFIER_RE.match(value):
        raise ValueError(
            f"{field_name} must be a plain SQL identifier "
            f"(letters, digits, underscore), got {value!r}"
        )


def _row_as_dict(row: Mapping[str, Any]) -> dict[str, Any]:
    return dict(row)


@dataclass(frozen=True)
class TargetConfig:
    """Static per-entity-kind search configuration.

    Attributes:
        entity_kind: Public name of the entity kind (e.g. 'subjects').
        table: Table holding the records.
        search_columns: Columns covered by the FULLTEXT index, in index order.
        id_column: Identifier column.
        output_columns: Columns returned on refetch/listing. Defaults to the
            identifier column followed by the search columns.
        scope_predicate: Optional SQL fragment restricting rows to a scope;
            must reference the bound parameter ``:scope`` (e.g.
            ``tenant_id = :scope``).
        record_factory: Maps a row mapping to a domain record (default: dict).
    """

    entity_kind: str
    table: str
    search_columns: tuple[str, ...]
    id_column: str = "id"
    output_columns: tuple[str, ...] = ()
    scope_predicate: str | None = None
    record_factory: Callable[[Mapping[str, Any]], Any] = field(
        default=_row_as_dict, compare=False
    )

    def __post_init__(self) -> None:
        if not self.entity_kind:
            raise ValueError("entity_kind must be a non-empty string")
        _validate_identifier(self.table, "table")
        _validate_identifier(self.id_column, "id_column")

        search_columns = tuple(self.search_columns)
        if not search_columns:
            raise ValueError("search_columns must name at least one column")
        for column in search_columns:
            _validate_identifier(column, "search_columns")
        object.__setattr__(self, "search_columns", search_columns)

        output_columns = tuple(self.output_columns) or (
            self.id_column,
            *(c for c in search_columns if c != self.id_column),
        )
        for column in output_columns:
            _validate_identifier(column, "output_columns")
        if self.id_column not in output_columns:
            output_columns = (self.id_column, *output_columns)
        object.__setattr__(self, "output_columns", output_columns)

        if self.scope_predicate is not None:
            if f":{SCOPE_PARAM}" not in self.scope_predicate:
                raise ValueError(
                    f"scope_predicate must reference the bound parameter :{SCOPE_PARAM}"
                )
            if ";" in self.scope_predicate:
                raise ValueError("scope_predicate must be a single SQL expression")

    @property
    def is_scoped(self) -> bool:
        return self.scope_predicate is not None

    def to_record(self, row: Mapping[str, Any]) -> Any:
        """Build a domain record from a refetch/listing row."""
        return self.record_factory(row)


class SearchTargetRegistry:
    """Immutable mapping of entity kind to TargetConfig, built at startup."""

    def __init__(self, targets: Iterable[TargetConfig] = ()) -> None:
        by_kind: dict[str, TargetConfig] = {}
        for target in targets:
            if target.entity_kind in by_kind:
                raise ValueError(f"Duplicate search target: {target.entity_kind}")
            by_kind[target.entity_kind] = target
        self._targets: Mapping[str, TargetConfig] = MappingProxyType(by_kind)

    def __contains__(self, entity_kind: object) -> bool:
        return entity_kind in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def get(self, entity_kind: str) -> TargetConfig | None:
        return self._targets.get(entity_kind)

    def kinds(self) -> list[str]:
        return sorted(self._targets)
