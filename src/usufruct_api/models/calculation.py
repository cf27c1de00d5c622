# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models for factor tables and usage value calculations."""

from decimal import Decimal
from typing import Final

from pydantic import Field, field_validator, model_validator

from .base import BaseModelConfig, CamelModelConfig

SEX_FEMALE: Final = "female"
SEX_MALE: Final = "male"
RECOGNIZED_SEXES: Final = frozenset({SEX_FEMALE, SEX_MALE})

# Largest signed 32-bit integer.
MAX_ASSET_VALUE: Final = 2_147_483_647


class FactorRow(BaseModelConfig):
    """One age band of a factor table; both bounds are inclusive."""

    min_age: int = Field(..., description="Lowest adjusted age covered by this row")
    max_age: int = Field(..., description="Highest adjusted age covered by this row")
    factor: Decimal = Field(..., ge=0, description="Multiplier applied for this band")

    @model_validator(mode="after")
    def validate_age_range(self) -> "FactorRow":
        """Ensure the band is not inverted."""
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) must be <= max_age ({self.max_age})"
            )
        return self

    def covers(self, age: int) -> bool:
        """Check whether ``age`` falls inside this band."""
        return self.min_age <= age <= self.max_age


class MethodSettings(BaseModelConfig):
    """Every factor table version of one method plus the active version.

    Row order is significant: lookups take the first matching row.
    """

    active_version: str = Field(..., min_length=1, description="Version label in use")
    versions: dict[str, tuple[FactorRow, ...]] = Field(
        ..., min_length=1, description="Factor tables keyed by version label"
    )

    @model_validator(mode="after")
    def validate_active_version(self) -> "MethodSettings":
        """Active version must exist and reference a non-empty table."""
        if self.active_version not in self.versions:
            raise ValueError(
                f"active_version '{self.active_version}' is not one of "
                f"{sorted(self.versions)}"
            )
        if not self.versions[self.active_version]:
            raise ValueError(
                f"factor table for active_version '{self.active_version}' is empty"
            )
        return self

    @property
    def active_table(self) -> tuple[FactorRow, ...]:
        """Rows of the active factor table version."""
        return self.versions[self.active_version]


class AgeAdjustmentPolicy(BaseModelConfig):
    """Years subtracted from the declared age depending on sex."""

    female_adjustment: int = Field(default=5, description="Years subtracted for women")
    male_adjustment: int = Field(default=0, description="Years subtracted for men")


class FactorConfiguration(BaseModelConfig):
    """Everything the calculation core reads from configuration at startup."""

    age_adjustment: AgeAdjustmentPolicy = Field(default_factory=AgeAdjustmentPolicy)
    factor_methods: dict[str, MethodSettings] = Field(
        ..., min_length=1, description="Settings per factor method name"
    )


class CalculationRequest(CamelModelConfig):
    """Input of a usage value calculation."""

    asset_value: int = Field(
        ...,
        strict=True,
        gt=0,
        le=MAX_ASSET_VALUE,
        description="Value of the asset",
        examples=[100000],
    )
    age: int = Field(
        ..., strict=True, ge=0, le=130, description="Age of the person in years", examples=[45]
    )
    sex: str = Field(
        ..., min_length=1, description="Sex of the person ('male' or 'female')", examples=["female"]
    )
    factor_method: str = Field(
        ..., min_length=1, description="Name of the factor calculation method", examples=["EenLeven"]
    )

    @field_validator("sex")
    @classmethod
    def validate_sex(cls, v: str) -> str:
        """Accept 'male' or 'female' in any case, stored lower case."""
        normalized = v.lower()
        if normalized not in RECOGNIZED_SEXES:
            raise ValueError("Sex must be 'male' or 'female'")
        return normalized


class CalculationResult(BaseModelConfig):
    """Outcome of a successful usage value calculation."""

    asset_value: Decimal = Field(..., description="Asset value from the request")
    used_factor: Decimal = Field(..., description="Factor of the matching row")
    usage_value: Decimal = Field(..., description="Usage value rounded to whole units")
