"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, telemetry and loading the
process graph. An invalid process definition aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.application.services.process_graph import ProcessGraph
from app.application.services.store_opening_process import (
    STORE_OPENING_PROCESS_VERSION,
    get_store_opening_definitions,
)
from app.core.config import get_settings
from app.domain.exceptions import ProcessGraphException
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


def load_process_graph() -> ProcessGraph:
    """Build the store-opening process graph.

    Raises:
        ProcessGraphException: If the configured definitions are not a valid DAG.
    """
    try:
        return ProcessGraph.from_definitions(
            get_store_opening_definitions(), version=STORE_OPENING_PROCESS_VERSION
        )
    except ProcessGraphException as exc:
        logger.critical(
            "Invalid process definition (%s): %s", exc.details.get("reason"), exc.message
        )
        raise


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, process graph, telemetry (if enabled).
    Shutdown: telemetry flush.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    app.state.process_graph = load_process_graph()

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
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
