"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: search target registry,
telemetry, and SQL engine dispose. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from ranked_search.core.config import get_settings
from ranked_search.infrastructure.persistence import database
from ranked_search.infrastructure.persistence.search import build_default_registry
from ranked_search.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: search target registry, telemetry (if enabled, with SQLAlchemy
    instrumentation when a database is configured). Shutdown: telemetry
    flush, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.search_registry = build_default_registry()
    logger.info(
        "Search targets registered: %s", ", ".join(app.state.search_registry.kinds())
    )

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        if settings.sql_configured:
            telemetry.instrument_sqlalchemy(database.get_engine())
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
