# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Calculation method contract shared by every factor method."""

from abc import ABC, abstractmethod
from typing import ClassVar

from ...core.errors import NoFactorFound
from ...core.result_types import Result
from ...models.calculation import CalculationRequest, CalculationResult


class CalculationMethod(ABC):
    """A named rule turning a calculation request into a usage value.

    Subclasses set ``name`` as a class attribute; the registry looks methods
    up by that name, case-insensitively. Implementations must not mutate
    their state after construction since one instance serves every request.
    """

    name: ClassVar[str]

    @abstractmethod
    def calculate(
        self, request: CalculationRequest, correlation_id: str
    ) -> Result[CalculationResult, NoFactorFound]:
        """Compute the usage value for ``request``.

        Business-rule failures are returned as ``Err``; anything else is
        logged and raised unchanged.
        """

    def is_ready(self) -> bool:
        """Whether the method has everything it needs to serve requests."""
        return True
