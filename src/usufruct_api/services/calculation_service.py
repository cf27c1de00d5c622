# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Calculation service: resolve a method, run it, return a Result."""

from beartype import beartype

from ..core.errors import CalculationError, UnexpectedFailure
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok
from ..models.calculation import CalculationRequest, CalculationResult
from .registry import MethodRegistry

logger = get_logger(__name__)


class CalculationService:
    """Entry point of the calculation core used by the HTTP layer."""

    def __init__(self, registry: MethodRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> MethodRegistry:
        return self._registry

    @beartype
    def calculate(
        self, request: CalculationRequest, correlation_id: str
    ) -> Ok[CalculationResult] | Err[CalculationError]:
        """Compute the usage value for ``request``.

        Returns:
            ``Ok(CalculationResult)``, ``Err(UnknownMethod)``,
            ``Err(NoFactorFound)`` or ``Err(UnexpectedFailure)``. Nothing
            is raised for failures inside a calculation method.
        """
        resolved = self._registry.resolve(request.factor_method, correlation_id)
        if resolved.is_err():
            return resolved

        method = resolved.unwrap()
        try:
            return method.calculate(request, correlation_id)
        except Exception as e:
            logger.error(
                "Unexpected error in calculation: method=%s error_type=%s",
                method.name,
                type(e).__name__,
                exc_info=True,
                extra={"correlation_id": correlation_id, "method": method.name},
            )
            return Err(UnexpectedFailure(method_name=method.name, exception_type=type(e).__name__))
