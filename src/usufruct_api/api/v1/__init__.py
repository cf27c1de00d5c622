# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""API v1 router aggregation.

This module combines all v1 API routers into a single router
that can be mounted on the main FastAPI application.
"""

from fastapi import APIRouter

from .calculate import debug_router as calculate_debug_router
from .calculate import router as calculate_router
from .health import report_router as health_report_router
from .health import router as health_router

# Create main v1 router
router = APIRouter(prefix="/api/v1")

router.include_router(health_router)
router.include_router(calculate_router)

# Diagnostics, mounted by the app factory only when enabled
debug_router = APIRouter(prefix="/api/v1")
debug_router.include_router(calculate_debug_router)


__all__ = ["debug_router", "health_report_router", "router"]
