"""
Service banner and health check routes.
"""

from fastapi import APIRouter, Depends, Response, status

from etherstake import __version__
from etherstake.di.container import DIContainer
from etherstake.di.dependencies import get_container

router = APIRouter(tags=["Health"])


@router.get("/")
async def root(container: DIContainer = Depends(get_container)):
    """Root endpoint."""
    return {
        "service": container.settings.APP_NAME,
        "status": "running",
        "version": __version__,
        "description": "Time-locked staking backend",
    }


@router.get("/health")
async def health_check(
    response: Response,
    container: DIContainer = Depends(get_container),
):
    """
    Health check endpoint.

    Returns 503 when the database (or Redis, if enabled) is unreachable.
    """
    settings = container.settings

    db_healthy = await container.database.health_check()

    redis_status = "disabled"
    redis_healthy = True
    if settings.REDIS_ENABLED:
        redis_healthy = await container.cache_client.ping()
        redis_status = "healthy" if redis_healthy else "unhealthy"

    healthy = db_healthy and redis_healthy
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if healthy else "degraded",
        "version": __version__,
        "components": {
            "database": {"status": "healthy" if db_healthy else "unhealthy"},
            "cache": {"status": redis_status, "enabled": settings.REDIS_ENABLED},
        },
    }
