# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Calculation core: methods, registry and the service tying them together."""

from .calculation_service import CalculationService
from .methods import CalculationMethod, SingleLifeUsufructMethod
from .registry import METHOD_TYPES, MethodRegistry, build_registry

__all__ = [
    "CalculationMethod",
    "CalculationService",
    "METHOD_TYPES",
    "MethodRegistry",
    "SingleLifeUsufructMethod",
    "build_registry",
]
