"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, telemetry, the
process-wide database engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from chatsearch.core.config import get_settings
from chatsearch.infrastructure.persistence import database
from chatsearch.shared.telemetry import (
    Telemetry,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, database engine (created once here and shared
    by every request), telemetry (if enabled). Shutdown order: telemetry
    shutdown, engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    engine = database.get_engine()
    logger.info("Database engine created (pool_size=%s)", engine.pool.size())

    if settings.telemetry_enabled:
        telemetry = Telemetry(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.start(
            settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
        )
        set_telemetry(telemetry)
        telemetry.instrument_sqlalchemy(engine)
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
