# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""API payload schemas."""

from .calculation import CalculationApiResponse, CalculationResponse
from .common import APIInfo
from .health import HealthCheckEntry, HealthReport, HealthStatusResponse
from .problem import PROBLEM_JSON, ProblemDetails

__all__ = [
    "APIInfo",
    "CalculationApiResponse",
    "CalculationResponse",
    "HealthCheckEntry",
    "HealthReport",
    "HealthStatusResponse",
    "PROBLEM_JSON",
    "ProblemDetails",
]
