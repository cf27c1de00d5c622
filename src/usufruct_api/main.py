# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Usufruct API - Main Application Module."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from beartype import beartype
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from .api.middleware import CORRELATION_HEADER, CorrelationIdMiddleware
from .api.problems import register_exception_handlers
from .api.v1 import debug_router as v1_debug_router
from .api.v1 import health_report_router
from .api.v1 import router as v1_router
from .core.config import Settings, get_settings
from .core.factor_config import load_factor_configuration
from .core.logging_utils import configure_logging, get_logger
from .core.rate_limiter import RateLimitingMiddleware, RateLimitRule
from .models.calculation import FactorConfiguration
from .schemas.common import APIInfo
from .services import CalculationService, build_registry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle - startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s %s in %s mode with methods %s",
        settings.app_name,
        settings.app_version,
        settings.api_env,
        app.state.calculation_service.registry.names,
    )
    yield
    logger.info("Shutting down %s", settings.app_name)


@beartype
def create_app(
    settings: Settings | None = None,
    factor_configuration: FactorConfiguration | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings; read from the environment if omitted.
        factor_configuration: Factor tables to serve; loaded from
            ``settings.factor_config_path`` if omitted.

    Returns:
        FastAPI: Configured application instance

    Raises:
        ConfigurationInvalid: if the factor configuration cannot be loaded
            or does not cover every registered method.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level)

    if factor_configuration is None:
        factor_configuration = load_factor_configuration(settings.factor_config_path)
    service = CalculationService(build_registry(factor_configuration))

    app = FastAPI(
        title=settings.app_name,
        description="Usage value calculation for usufruct rights on assets",
        version=settings.app_version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.calculation_service = service

    # Middleware added last runs first: CORS, trusted hosts, correlation, rate limit
    app.add_middleware(
        RateLimitingMiddleware,
        rule=RateLimitRule(
            permit_limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
        ),
        enabled=settings.rate_limit_enabled,
    )
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.allowed_hosts)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER, "Retry-After"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(v1_router)
    app.include_router(health_report_router)
    if settings.enable_debug_endpoints:
        logger.warning("Debug endpoints enabled")
        app.include_router(v1_debug_router)

    # Root endpoint
    @app.get("/")
    async def root(request: Request) -> APIInfo:
        """Root endpoint returning API information."""
        return APIInfo(
            name=settings.app_name,
            version=settings.app_version,
            status="operational",
            environment=settings.api_env,
            methods=request.app.state.calculation_service.registry.names,
        )

    return app


# Create the application instance
app = create_app()


@beartype
def main() -> None:
    """Run the main application entry point."""
    settings = get_settings()
    logger.info("Serving %s %s", settings.app_name, settings.app_version)
    uvicorn.run(
        "usufruct_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level="info" if not settings.is_production else "error",
    )


if __name__ == "__main__":
    main()
