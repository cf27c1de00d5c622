# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Request and response payloads of the calculate endpoint."""

from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from ..models.base import CamelModelConfig
from ..models.calculation import CalculationRequest, CalculationResult


def _decimal_to_number(value: Decimal) -> int | float:
    """Render whole decimals as JSON integers, others as JSON numbers."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


JsonDecimal = Annotated[
    Decimal, PlainSerializer(_decimal_to_number, return_type=int | float, when_used="json")
]


class CalculationResponse(CamelModelConfig):
    """Calculation outcome as returned to API clients."""

    asset_value: JsonDecimal = Field(..., description="Asset value from the request")
    used_factor: JsonDecimal = Field(..., description="Factor applied during the calculation")
    usage_value: JsonDecimal = Field(
        ..., description="Calculated usage value, rounded to the nearest whole unit"
    )

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculationResponse":
        return cls(
            asset_value=result.asset_value,
            used_factor=result.used_factor,
            usage_value=result.usage_value,
        )


class CalculationApiResponse(CamelModelConfig):
    """Envelope pairing the calculation result with its correlation id."""

    correlation_id: str = Field(..., description="Correlation id for end-to-end tracing")
    response: CalculationResponse = Field(..., description="Calculation result payload")


__all__ = [
    "CalculationApiResponse",
    "CalculationRequest",
    "CalculationResponse",
    "JsonDecimal",
]
