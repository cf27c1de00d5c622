# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Single-life ("EenLeven") usufruct factor method.

The yearly usage value of a usufruct on one life is the asset value times
a fixed 4% return times an age-banded factor. Women are rated a number of
years younger than their declared age.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from beartype import beartype

from ...core.errors import NoFactorFound
from ...core.logging_utils import get_logger
from ...core.result_types import Err, Ok, Result
from ...models.calculation import (
    SEX_FEMALE,
    SEX_MALE,
    AgeAdjustmentPolicy,
    CalculationRequest,
    CalculationResult,
    FactorRow,
    MethodSettings,
)
from .base import CalculationMethod

logger = get_logger(__name__)

ANNUAL_RETURN_RATE: Final = Decimal("0.04")
WHOLE_UNITS: Final = Decimal("1")


class SingleLifeUsufructMethod(CalculationMethod):
    """Usage value for a usufruct held on a single life."""

    name = "EenLeven"

    def __init__(self, settings: MethodSettings, age_adjustment: AgeAdjustmentPolicy) -> None:
        self._settings = settings
        self._age_adjustment = age_adjustment

    @property
    def settings(self) -> MethodSettings:
        return self._settings

    def is_ready(self) -> bool:
        return bool(self._settings.active_table)

    @beartype
    def adjust_age(self, age: int, sex: str, correlation_id: str) -> int:
        """Apply the sex-dependent age offset."""
        normalized = sex.lower()
        if normalized == SEX_FEMALE:
            return age - self._age_adjustment.female_adjustment
        if normalized == SEX_MALE:
            return age - self._age_adjustment.male_adjustment

        logger.warning(
            "No age adjustment for unrecognized sex %r in method %s",
            sex,
            self.name,
            extra={"correlation_id": correlation_id, "method": self.name},
        )
        return age

    @beartype
    def find_row(self, adjusted_age: int) -> FactorRow | None:
        """Return the first row of the active table covering ``adjusted_age``."""
        return next(
            (row for row in self._settings.active_table if row.covers(adjusted_age)),
            None,
        )

    @beartype
    def calculate(
        self, request: CalculationRequest, correlation_id: str
    ) -> Ok[CalculationResult] | Err[NoFactorFound]:
        """Compute the usage value, rounded half away from zero."""
        try:
            adjusted_age = self.adjust_age(request.age, request.sex, correlation_id)
            row = self.find_row(adjusted_age)

            if row is None:
                logger.warning(
                    "No factor found for age %d in method %s",
                    adjusted_age,
                    self.name,
                    extra={
                        "correlation_id": correlation_id,
                        "method": self.name,
                        "adjusted_age": adjusted_age,
                    },
                )
                return Err(NoFactorFound(adjusted_age=adjusted_age, method_name=self.name))

            asset_value = Decimal(request.asset_value)
            usage_value = (asset_value * ANNUAL_RETURN_RATE * row.factor).quantize(
                WHOLE_UNITS, rounding=ROUND_HALF_UP
            )

            logger.info(
                "Calculation success: method=%s assetValue=%s adjAge=%d usedFactor=%s usageValue=%s",
                self.name,
                asset_value,
                adjusted_age,
                row.factor,
                usage_value,
                extra={
                    "correlation_id": correlation_id,
                    "method": self.name,
                    "asset_value": str(asset_value),
                    "adjusted_age": adjusted_age,
                    "used_factor": str(row.factor),
                    "usage_value": str(usage_value),
                },
            )

            return Ok(
                CalculationResult(
                    asset_value=asset_value,
                    used_factor=row.factor,
                    usage_value=usage_value,
                )
            )
        except Exception:
            logger.exception(
                "Exception occurred in %s",
                self.name,
                extra={"correlation_id": correlation_id, "method": self.name},
            )
            raise
