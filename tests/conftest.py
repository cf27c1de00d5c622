"""Shared fixtures for the usufruct calculation service tests.

The reference factor table used throughout has one version "2024" with
two bands, ``20-29 -> 20`` and ``30-39 -> 19``; women are rated five years
younger and men are not adjusted.
"""

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from usufruct_api.core.config import Settings, clear_settings_cache
from usufruct_api.main import create_app
from usufruct_api.models.calculation import (
    AgeAdjustmentPolicy,
    FactorConfiguration,
    FactorRow,
    MethodSettings,
)
from usufruct_api.services import (
    CalculationService,
    MethodRegistry,
    SingleLifeUsufructMethod,
    build_registry,
)


@pytest.fixture
def method_settings() -> MethodSettings:
    """Single-life settings with the reference 2024 table."""
    return MethodSettings(
        active_version="2024",
        versions={
            "2024": (
                FactorRow(min_age=20, max_age=29, factor=Decimal("20")),
                FactorRow(min_age=30, max_age=39, factor=Decimal("19")),
            )
        },
    )


@pytest.fixture
def age_adjustment() -> AgeAdjustmentPolicy:
    """Five years for women, none for men."""
    return AgeAdjustmentPolicy(female_adjustment=5, male_adjustment=0)


@pytest.fixture
def factor_configuration(
    method_settings: MethodSettings, age_adjustment: AgeAdjustmentPolicy
) -> FactorConfiguration:
    """Factor configuration registering only the single-life method."""
    return FactorConfiguration(
        age_adjustment=age_adjustment,
        factor_methods={"EenLeven": method_settings},
    )


@pytest.fixture
def single_life_method(
    method_settings: MethodSettings, age_adjustment: AgeAdjustmentPolicy
) -> SingleLifeUsufructMethod:
    """Single-life method over the reference table."""
    return SingleLifeUsufructMethod(method_settings, age_adjustment)


@pytest.fixture
def registry(factor_configuration: FactorConfiguration) -> MethodRegistry:
    """Registry built from the reference configuration."""
    return build_registry(factor_configuration)


@pytest.fixture
def calculation_service(registry: MethodRegistry) -> CalculationService:
    """Calculation service over the reference registry."""
    return CalculationService(registry)


@pytest.fixture
def test_settings() -> Settings:
    """Settings for HTTP tests: no rate limiting, debug endpoints on."""
    return Settings(
        api_env="development",
        rate_limit_enabled=False,
        enable_debug_endpoints=True,
    )


@pytest.fixture
def app(test_settings: Settings, factor_configuration: FactorConfiguration) -> FastAPI:
    """Application wired with the reference factor configuration."""
    return create_app(settings=test_settings, factor_configuration=factor_configuration)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Test client that re-raises nothing so 500 handlers can be asserted."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Keep cached settings from leaking between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()
