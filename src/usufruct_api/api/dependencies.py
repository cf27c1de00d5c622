# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""FastAPI dependencies exposing application state to endpoints.

The calculation service and settings are built once by the app factory
and stored on ``app.state``; these dependencies hand them to endpoints.
"""

from typing import Annotated

from beartype import beartype
from fastapi import Depends, Request

from ..core.config import Settings
from ..core.logging_utils import current_correlation_id
from ..services.calculation_service import CalculationService


@beartype
def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


@beartype
def get_calculation_service(request: Request) -> CalculationService:
    """Calculation service shared by every request."""
    return request.app.state.calculation_service


@beartype
def get_correlation_id(request: Request) -> str:
    """Correlation id assigned by ``CorrelationIdMiddleware``."""
    return getattr(request.state, "correlation_id", None) or current_correlation_id()


AppSettings = Annotated[Settings, Depends(get_app_settings)]
CalculationServiceDep = Annotated[CalculationService, Depends(get_calculation_service)]
CorrelationId = Annotated[str, Depends(get_correlation_id)]
