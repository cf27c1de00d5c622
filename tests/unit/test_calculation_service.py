"""Unit tests for the calculation service."""

import logging
from decimal import Decimal

import pytest

from usufruct_api.core.errors import NoFactorFound, UnexpectedFailure, UnknownMethod
from usufruct_api.core.result_types import Err, Ok
from usufruct_api.models.calculation import CalculationRequest, CalculationResult
from usufruct_api.services import CalculationMethod, CalculationService, MethodRegistry

CORRELATION_ID = "0d9e8f7a-6b5c-4d3e-8f2a-1b0c9d8e7f6a"


class ExplodingMethod(CalculationMethod):
    """Method failing outside the business rules."""

    name = "Exploding"

    def calculate(self, request: CalculationRequest, correlation_id: str) -> Ok[CalculationResult]:
        raise ZeroDivisionError("division by zero")


def _request(method: str = "EenLeven", age: int = 30, sex: str = "male") -> CalculationRequest:
    return CalculationRequest(asset_value=1000, age=age, sex=sex, factor_method=method)


class TestCalculationService:
    """Resolution and execution through the service."""

    @pytest.mark.parametrize(
        ("age", "sex", "factor", "usage"),
        [
            (30, "male", Decimal("19"), Decimal("760")),
            (35, "female", Decimal("19"), Decimal("760")),
            (25, "male", Decimal("20"), Decimal("800")),
        ],
    )
    def test_successful_calculation(
        self,
        calculation_service: CalculationService,
        age: int,
        sex: str,
        factor: Decimal,
        usage: Decimal,
    ) -> None:
        """Known methods compute the usage value."""
        result = calculation_service.calculate(_request(age=age, sex=sex), CORRELATION_ID)

        assert result == Ok(
            CalculationResult(asset_value=Decimal("1000"), used_factor=factor, usage_value=usage)
        )

    def test_method_name_is_case_insensitive(self, calculation_service: CalculationService) -> None:
        """Lower case method names are accepted."""
        result = calculation_service.calculate(_request(method="eenleven"), CORRELATION_ID)

        assert result.is_ok()

    def test_unknown_method(self, calculation_service: CalculationService) -> None:
        """Unknown method names fail before any calculation."""
        result = calculation_service.calculate(_request(method="Unknown"), CORRELATION_ID)

        assert result == Err(UnknownMethod(method_name="Unknown"))

    def test_no_factor_found(self, calculation_service: CalculationService) -> None:
        """Ages outside the table fail with NoFactorFound."""
        result = calculation_service.calculate(_request(age=10), CORRELATION_ID)

        assert result == Err(NoFactorFound(adjusted_age=10, method_name="EenLeven"))

    def test_unexpected_exception_becomes_failure_value(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Exceptions escaping a method are logged and returned, never raised."""
        service = CalculationService(MethodRegistry([ExplodingMethod()]))

        with caplog.at_level(logging.ERROR):
            result = service.calculate(_request(method="exploding"), CORRELATION_ID)

        assert result == Err(
            UnexpectedFailure(method_name="Exploding", exception_type="ZeroDivisionError")
        )
        assert result.unwrap_err().status_code == 500
        assert result.unwrap_err().message == "An unexpected error occurred."
        error_records = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert error_records
        assert error_records[0].exc_info is not None
        assert error_records[0].correlation_id == CORRELATION_ID
