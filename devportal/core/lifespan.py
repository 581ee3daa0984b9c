"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no
business logic here, only wiring of infrastructure (shared HTTP client,
Databricks client and its caches, DRN source, scaffolder registry,
telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from devportal.core.config import get_settings
from devportal.infrastructure.external.databricks import DatabricksClient
from devportal.infrastructure.mock import MockDrnSource
from devportal.scaffolder import create_action_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: telemetry (if enabled, so the shared client is
    instrumented), shared HTTP client, Databricks client, DRN source,
    action registry. Shutdown order: HTTP client close, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.telemetry_enabled:
        from devportal.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

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
        telemetry.instrument_httpx()
        telemetry.instrument_fastapi(app)
        logger.info("Telemetry initialized")

    # Shared HTTP client for Databricks calls (connection reuse).
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.databricks_http_timeout_seconds
    )

    # One client per process: its token and workspace caches are shared by all requests.
    if settings.databricks_configured:
        app.state.databricks_client = DatabricksClient.from_settings(
            settings, app.state.http_client
        )
        logger.info("Databricks client configured for %s", settings.databricks_base_url)
    else:
        app.state.databricks_client = None
        logger.warning("Databricks credentials missing; workspace routes will fail")

    app.state.drn_source = MockDrnSource()
    app.state.action_registry = create_action_registry(settings, app.state.drn_source)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    from devportal.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
