# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""RFC 7807 problem details returned for every error response."""

from datetime import datetime, timezone

from pydantic import Field

from ..models.base import CamelModelConfig

PROBLEM_JSON = "application/problem+json"


class ProblemDetails(CamelModelConfig):
    """Problem details body with tracing extensions."""

    type: str = Field(default="about:blank", description="Problem type URI")
    title: str = Field(..., min_length=1, description="Short summary of the problem")
    status: int = Field(..., ge=400, le=599, description="HTTP status code")
    detail: str | None = Field(default=None, description="Explanation of this occurrence")
    instance: str | None = Field(default=None, description="Request path that failed")

    trace_id: str | None = Field(default=None, description="Server-side trace identifier")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Moment the problem was reported",
    )
    correlation_id: str | None = Field(default=None, description="Request correlation id")
    error_code: str | None = Field(default=None, description="Machine-readable error code")
    errors: dict[str, list[str]] | None = Field(
        default=None, description="Validation messages grouped by field"
    )
