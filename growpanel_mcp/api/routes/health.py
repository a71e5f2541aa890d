"""
Health Router

Liveness endpoint for load balancers and container orchestrators. The
service holds no connections of its own between requests, so liveness is
the only signal exposed.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from growpanel_mcp import __version__

APP_VERSION = __version__

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the process is up."""
    return HealthResponse(status="healthy", version=APP_VERSION)
