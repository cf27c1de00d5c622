# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Health check payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HealthStatusResponse(BaseModel):
    """Basic liveness information for the API."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    status: str = Field(default="Healthy", pattern=r"^(Healthy|Degraded|Unhealthy)$")
    timestamp: datetime = Field(..., description="Health check timestamp")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")


class HealthCheckEntry(BaseModel):
    """Outcome of one named health check."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    key: str = Field(..., min_length=1, description="Health check name")
    status: str = Field(..., pattern=r"^(Healthy|Degraded|Unhealthy)$")
    description: str | None = Field(default=None, description="Additional status message")


class HealthReport(BaseModel):
    """Aggregated report of every registered health check."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    status: str = Field(..., pattern=r"^(Healthy|Degraded|Unhealthy)$")
    results: list[HealthCheckEntry] = Field(default_factory=list)
