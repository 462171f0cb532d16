"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..dependencies import ServiceContainer, get_container

router = APIRouter()


class StatusResponse(BaseModel):
    """Root status response model."""

    status: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/", response_model=StatusResponse)
async def root_status() -> StatusResponse:
    """Returns 200 while the API is running."""
    return StatusResponse(status="OK")


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    container: ServiceContainer = Depends(get_container),
) -> HealthResponse:
    """
    Basic health check endpoint.

    Reports the running version; does not touch the database.
    """
    return HealthResponse(status="healthy", version=container.settings.app_version)
