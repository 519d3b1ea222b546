"""SearchExecutor tests against a SQLite engine (aiosqlite)."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from ranked_search.application.dtos.search import RankedHit, Statement, TokenSet
from ranked_search.domain.exceptions import StoreError
from ranked_search.infrastructure.persistence.search import QueryBuilder, SearchExecutor


async def test_execute_returns_rows_as_dicts(sqlite_engine, note_target) -> None:
    executor = SearchExecutor(sqlite_engine)
    rows = await executor.execute(QueryBuilder().build_listing(note_target))
    assert sorted(rows, key=lambda r: r["id"]) == [
        {"id": 1, "content": "pump note"},
        {"id": 3, "content": "valve note"},
    ]


async def test_noop_statement_does_not_touch_engine() -> None:
    engine = MagicMock()
    rows = await SearchExecutor(engine).execute(Statement.noop())
    assert rows == []
    engine.connect.assert_not_called()


async def test_malformed_statement_raises_store_error(sqlite_engine) -> None:
    executor = SearchExecutor(sqlite_engine)
    with pytest.raises(StoreError) as exc_info:
        await executor.execute(Statement(sql="SELECT nope FROM missing_table"))
    assert exc_info.value.error_code == "STORE_ERROR"
    assert isinstance(exc_info.value.__cause__, OperationalError)


async def test_match_against_unsupported_store_raises_store_error(
    sqlite_engine, article_target
) -> None:
    """SQLite has no MATCH ... AGAINST; the failure surfaces as StoreError."""
    stmt = QueryBuilder().build_ranked_search(TokenSet(("pump*",)), article_target)
    with pytest.raises(StoreError):
        await SearchExecutor(sqlite_engine).fetch_hits(stmt)


async def test_connection_released_after_failure(sqlite_engine) -> None:
    executor = SearchExecutor(sqlite_engine)
    with pytest.raises(StoreError):
        await executor.execute(Statement(sql="SELECT * FROM missing_table"))
    assert sqlite_engine.pool.checkedout() == 0
    rows = await executor.execute(Statement(sql="SELECT COUNT(*) AS n FROM note"))
    assert rows == [{"n": 2}]
    assert sqlite_engine.pool.checkedout() == 0


async def test_fetch_hits_converts_rows(sqlite_engine) -> None:
    executor = SearchExecutor(sqlite_engine)
    hits = await executor.fetch_hits(
        Statement(sql="SELECT id AS id, 1.5 AS score FROM note ORDER BY id DESC")
    )
    assert hits == [RankedHit(id=3, score=1.5), RankedHit(id=1, score=1.5)]
