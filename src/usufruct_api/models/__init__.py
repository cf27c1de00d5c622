# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models for the calculation core."""

from .base import BaseModelConfig, CamelModelConfig
from .calculation import (
    AgeAdjustmentPolicy,
    CalculationRequest,
    CalculationResult,
    FactorConfiguration,
    FactorRow,
    MethodSettings,
)

__all__ = [
    "AgeAdjustmentPolicy",
    "BaseModelConfig",
    "CalculationRequest",
    "CalculationResult",
    "CamelModelConfig",
    "FactorConfiguration",
    "FactorRow",
    "MethodSettings",
]
