"""Pytest configuration and fixtures for ranked-search.

Unit and API tests run against a file-backed SQLite database through
aiosqlite. SQLite has no MATCH ... AGAINST, so ranked statements are served
by RankingStubExecutor while listing and refetch statements run for real.
MySQL tests in tests/integration are marked requires_db.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from ranked_search.application.dtos.search import Statement
from ranked_search.domain.value_objects import TargetConfig
from ranked_search.infrastructure.persistence.search import SearchExecutor

ARTICLE_ROWS: list[dict[str, Any]] = [
    {"id": 2, "tenant_id": "t1", "title": "Hydraulic pump", "body": "pump seals and pressure"},
    {"id": 5, "tenant_id": "t1", "title": "Pump maintenance", "body": "hydraulic pump service"},
    {"id": 9, "tenant_id": "t1", "title": "Electric motor", "body": "motor with pump coupling"},
    {"id": 11, "tenant_id": "t2", "title": "Pump audit", "body": "other tenant"},
]

NOTE_ROWS: list[dict[str, Any]] = [
    {"id": 1, "content": "pump note"},
    {"id": 3, "content": "valve note"},
]


class RankingStubExecutor(SearchExecutor):
    """SearchExecutor that answers ranked statements from canned rows.

    Every statement is recorded; non-ranked statements hit the real engine.
    """

    def __init__(self, engine: AsyncEngine, ranked_rows: Sequence[Mapping[str, Any]] = ()) -> None:
        super().__init__(engine)
        self.ranked_rows = [dict(r) for r in ranked_rows]
        self.statements: list[Statement] = []

    async def execute(self, statement: Statement) -> list[dict[str, Any]]:
        self.statements.append(statement)
        if "AGAINST(" in statement.sql:
            return [dict(r) for r in self.ranked_rows]
        return await super().execute(statement)


@pytest.fixture
def article_target() -> TargetConfig:
    return TargetConfig(
        entity_kind="articles",
        table="article",
        search_columns=("title", "body"),
        id_column="id",
        output_columns=("id", "tenant_id", "title"),
        scope_predicate="tenant_id = :scope",
    )


@pytest.fixture
def note_target() -> TargetConfig:
    return TargetConfig(
        entity_kind="notes",
        table="note",
        search_columns=("content",),
    )


@pytest.fixture
async def sqlite_engine(tmp_path) -> AsyncEngine:
    """Engine over a fresh SQLite file with article and note tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'search.db'}")
    async with engine.begin() as conn:
        await conn.execute(
            text(
                "CREATE TABLE article (id INTEGER PRIMARY KEY, tenant_id TEXT, "
                "title TEXT, body TEXT)"
            )
        )
        await conn.execute(text("CREATE TABLE note (id INTEGER PRIMARY KEY, content TEXT)"))
        await conn.execute(
            text(
                "INSERT INTO article (id, tenant_id, title, body) "
                "VALUES (:id, :tenant_id, :title, :body)"
            ),
            ARTICLE_ROWS,
        )
        await conn.execute(
            text("INSERT INTO note (id, content) VALUES (:id, :content)"), NOTE_ROWS
        )
    yield engine
    await engine.dispose()


@pytest.fixture
def settings_env(monkeypatch):
    """Isolate settings from the developer's .env / environment."""
    from ranked_search.core.config import get_settings
    from ranked_search.infrastructure.persistence import database

    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setenv("TELEMETRY_ENABLED", "false")
    get_settings.cache_clear()
    monkeypatch.setattr(database, "engine", None)
    yield
    get_settings.cache_clear()


@pytest.fixture
def app(settings_env):
    """Fresh FastAPI app; tests may set app.dependency_overrides."""
    from ranked_search.main import create_app

    return create_app()


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def ranking_executor(sqlite_engine) -> RankingStubExecutor:
    """Stub executor over sqlite_engine; set .ranked_rows per test."""
    return RankingStubExecutor(sqlite_engine)
