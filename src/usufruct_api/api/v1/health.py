# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Health check endpoints for monitoring service status.

``/api/v1/health`` is a cheap liveness probe. The unversioned ``/health``
report runs the registered checks and answers 503 when any of them fails.
"""

from datetime import datetime, timezone

from beartype import beartype
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ...core.logging_utils import get_logger
from ...schemas.health import HealthCheckEntry, HealthReport, HealthStatusResponse
from ...services.calculation_service import CalculationService
from ..dependencies import AppSettings, CalculationServiceDep

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])

# Mounted at the application root, outside the versioned prefix.
report_router = APIRouter(tags=["health"])


@router.get("", response_model=HealthStatusResponse)
@beartype
async def health_check(settings: AppSettings) -> HealthStatusResponse:
    """Report that the API process is up."""
    return HealthStatusResponse(
        status="Healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        environment=settings.api_env,
    )


@beartype
def check_factor_tables(service: CalculationService) -> HealthCheckEntry:
    """Verify that methods are registered and each has an active table."""
    registry = service.registry
    if len(registry) == 0:
        return HealthCheckEntry(
            key="factor_tables",
            status="Unhealthy",
            description="No factor methods registered",
        )

    not_ready = [method.name for method in registry.methods if not method.is_ready()]
    if not_ready:
        return HealthCheckEntry(
            key="factor_tables",
            status="Unhealthy",
            description=f"Empty active factor table for: {', '.join(not_ready)}",
        )

    return HealthCheckEntry(
        key="factor_tables",
        status="Healthy",
        description=f"{len(registry)} factor method(s) loaded",
    )


@report_router.get(
    "/health",
    response_model=HealthReport,
    responses={503: {"model": HealthReport, "description": "A check failed"}},
)
@beartype
async def health_report(service: CalculationServiceDep) -> HealthReport | JSONResponse:
    """Run every health check and aggregate the outcome."""
    results = [check_factor_tables(service)]

    if any(entry.status == "Unhealthy" for entry in results):
        overall = "Unhealthy"
    elif any(entry.status == "Degraded" for entry in results):
        overall = "Degraded"
    else:
        overall = "Healthy"

    report = HealthReport(status=overall, results=results)
    if overall == "Unhealthy":
        logger.warning("Health report unhealthy: %s", [e.key for e in results if e.status != "Healthy"])
        return JSONResponse(status_code=503, content=report.model_dump(mode="json"))
    return report
