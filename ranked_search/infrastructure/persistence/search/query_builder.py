"""Statement building for MySQL boolean-mode full-text search.

Only TargetConfig identifiers (validated at construction) are interpolated
into SQL text. The search term, scope, limit and every refetch identifier
are named bound parameters.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ranked_search.application.dtos.search import Statement, TokenSet
from ranked_search.domain.value_objects.search import SCOPE_PARAM, TargetConfig

TERM_PARAM = "term"
LIMIT_PARAM = "limit"
ID_PARAM_PREFIX = "id_"


class QueryBuilder:
    """Render ranked-search, refetch and listing statements for a TargetConfig."""

    @staticmethod
    def _match_expression(cfg: TargetConfig) -> str:
        columns = ", ".join(cfg.search_columns)
        return f"MATCH({columns}) AGAINST(:{TERM_PARAM} IN BOOLEAN MODE)"

    @staticmethod
    def _scope_clause(cfg: TargetConfig, scope: Any) -> tuple[str | None, dict[str, Any]]:
        """Scope predicate and its parameter; (None, {}) when unscoped.

        An empty-string scope counts as no scope.
        """
        if scope is None or scope == "" or not cfg.is_scoped:
            return None, {}
        return f"({cfg.scope_predicate})", {SCOPE_PARAM: scope}

    def build_ranked_search(
        self,
        tokens: TokenSet,
        cfg: TargetConfig,
        scope: Any = None,
        limit: int | None = None,
    ) -> Statement:
        """SELECT id, relevance score for matching rows, best first.

        The term is tokens joined by single spaces, bound once as :term.
        Rows that do not match are excluded so zero hits is observable.
        """
        match = self._match_expression(cfg)
        params: dict[str, Any] = {TERM_PARAM: tokens.as_boolean_query()}
        conditions = [match]
        scope_sql, scope_params = self._scope_clause(cfg, scope)
        if scope_sql:
            conditions.append(scope_sql)
            params.update(scope_params)

        sql = (
            f"SELECT {cfg.id_column} AS id, {match} AS score "
            f"FROM {cfg.table} "
            f"WHERE {' AND '.join(conditions)} "
            "ORDER BY score DESC"
        )
        if limit is not None:
            sql += f" LIMIT :{LIMIT_PARAM}"
            params[LIMIT_PARAM] = int(limit)
        return Statement(sql=sql, params=params)

    def build_refetch(self, ids: Sequence[Any], cfg: TargetConfig) -> Statement:
        """SELECT output columns for ids, ordered by position in ids.

        Each identifier is bound as :id_<n>. A CASE over the same parameters
        restores the caller's order, since IN (...) alone does not. With no
        ids the statement is a no-op and must not reach the store.
        """
        if not ids:
            return Statement.noop()

        params: dict[str, Any] = {}
        placeholders: list[str] = []
        positions: list[str] = []
        for position, identifier in enumerate(ids):
            name = f"{ID_PARAM_PREFIX}{position}"
            params[name] = identifier
            placeholders.append(f":{name}")
            positions.append(f"WHEN :{name} THEN {position}")

        columns = ", ".join(cfg.output_columns)
        sql = (
            f"SELECT {columns} FROM {cfg.table} "
            f"WHERE {cfg.id_column} IN ({', '.join(placeholders)}) "
            f"ORDER BY CASE {cfg.id_column} {' '.join(positions)} END"
        )
        return Statement(sql=sql, params=params)

    def build_listing(self, cfg: TargetConfig, scope: Any = None) -> Statement:
        """SELECT every row for cfg (optionally scoped), store-default order."""
        columns = ", ".join(cfg.output_columns)
        sql = f"SELECT {columns} FROM {cfg.table}"
        scope_sql, params = self._scope_clause(cfg, scope)
        if scope_sql:
            sql += f" WHERE {scope_sql}"
        return Statement(sql=sql, params=params)
