"""Basic health check endpoint."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from restgate import __version__

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Overall system status
        version: Running restgate version
    """

    status: str = Field(..., description="Overall system status")
    version: str = Field(..., description="restgate version")

    class Config:
        json_schema_extra = {"examples": [{"status": "healthy", "version": "1.0.0"}]}


@router.get("/", include_in_schema=False)
async def root_redirect() -> RedirectResponse:
    """Redirect root path to /health."""
    return RedirectResponse(url="/health")


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    response_model=HealthResponse,
    summary="System Health Check",
)
async def health_check() -> HealthResponse:
    """Report that the API process is up."""
    return HealthResponse(status="healthy", version=__version__)
