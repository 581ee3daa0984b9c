"""Health check endpoints. No dependencies; used for liveness and readiness checks."""

from fastapi import APIRouter

from devportal.core.config import get_settings
from devportal.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check() -> ReadinessResponse:
    """Return ok plus whether Databricks credentials are configured."""
    return ReadinessResponse(databricks_configured=get_settings().databricks_configured)
