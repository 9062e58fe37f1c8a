"""Health check router

Provides health check endpoints for monitoring and service discovery.

Endpoints:
- GET /health: Service health status and metadata
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from ...hosting import ApplicationEnvironment
from ..contracts import HealthResponse
from ..deps import get_environment

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    environment: Annotated[ApplicationEnvironment, Depends(get_environment)],
) -> HealthResponse:
    """API health check"""
    return HealthResponse(
        status="healthy",
        service=environment.application_name,
        environment=environment.environment_name,
    )
