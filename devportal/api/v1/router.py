"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from devportal.api.v1.dependencies.
"""

from fastapi import APIRouter

from devportal.api.v1.endpoints import databricks, drn_viewer, health, scaffolder

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(databricks.router, prefix="/databricks", tags=["databricks"])
api_router.include_router(drn_viewer.router, prefix="/drn-viewer", tags=["drn-viewer"])
api_router.include_router(scaffolder.router, prefix="/scaffolder", tags=["scaffolder"])
