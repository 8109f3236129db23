"""
EtherStake API entry point.

create_app() builds a fully wired FastAPI instance; uvicorn loads it
through get_app() in factory mode.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from etherstake import __version__
from etherstake.config.settings import Settings, get_settings
from etherstake.di.container import DIContainer
from etherstake.domain.exceptions import EtherStakeException
from etherstake.infrastructure.monitoring import get_logger, setup_logging
from etherstake.presentation.api.middleware.error_handler import (
    etherstake_exception_handler,
    unhandled_exception_handler,
)
from etherstake.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from etherstake.presentation.api.middleware.rate_limit_middleware import (
    RateLimitMiddleware,
)
from etherstake.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)
from etherstake.presentation.api.routes import auth, health, staking, users

logger = get_logger(__name__)


def _install_middleware(
    app: FastAPI, settings: Settings, container: DIContainer
) -> None:
    """
    Add middleware innermost first.

    Resulting order for an incoming request:
    CORS -> request ID -> metrics -> rate limit -> routes
    """
    if container.rate_limiter is not None:
        app.add_middleware(
            RateLimitMiddleware,
            rate_limiter=container.rate_limiter,
            token_service=container.token_service,
        )
        logger.info(
            "Rate limiting enabled",
            extra={"requests_per_minute": settings.RATE_LIMIT_REQUESTS_PER_MINUTE},
        )

    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)

    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )


def _register_routes(app: FastAPI, settings: Settings) -> None:
    app.include_router(health.router)
    for module in (auth, users, staking):
        app.include_router(module.router, prefix="/api")

    if not settings.METRICS_ENABLED:
        return

    @app.get("/metrics", tags=["Monitoring"], include_in_schema=False)
    async def metrics():
        """Prometheus text exposition for scraping."""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the EtherStake application.

    Args:
        settings: Explicit settings (tests); process defaults otherwise

    Returns:
        Configured FastAPI application whose lifespan owns the container
    """
    settings = settings or get_settings()

    setup_logging(
        level=settings.LOG_LEVEL,
        json_logs=settings.ENV == "production",
        service=settings.APP_NAME.lower(),
        env=settings.ENV,
    )

    container = DIContainer(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.initialize()
        logger.info(
            "EtherStake API ready",
            extra={"env": settings.ENV, "version": __version__},
        )
        try:
            yield
        finally:
            await container.shutdown()
            logger.info("EtherStake API stopped")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Time-locked staking with rewards and early-exit penalties",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    _install_middleware(app, settings, container)

    app.add_exception_handler(EtherStakeException, etherstake_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    _register_routes(app, settings)

    return app


def get_app() -> FastAPI:
    """
    Create application instance for uvicorn.

    uvicorn etherstake.main:get_app --factory
    """
    return create_app()


def main():
    """Run the API with uvicorn using API_* settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "etherstake.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
