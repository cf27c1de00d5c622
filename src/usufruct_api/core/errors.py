# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Error taxonomy for usage value calculations.

Business-rule failures are immutable values carried inside ``Err``.
Only ``ConfigurationInvalid`` is raised, because it happens at startup
where there is no caller to hand a result to.
"""

from typing import ClassVar, Union

from attrs import field, frozen


class ConfigurationInvalid(Exception):
    """Factor configuration cannot be used; the service must not start."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


@frozen
class UnknownMethod:
    """Requested factor method has no registered calculation strategy."""

    method_name: str = field()

    error_code: ClassVar[str] = "CALC-002"
    status_code: ClassVar[int] = 400

    @property
    def message(self) -> str:
        return f"Unknown factor method: '{self.method_name}'"


@frozen
class NoFactorFound:
    """Adjusted age falls outside every row of the active factor table."""

    adjusted_age: int = field()
    method_name: str = field()

    error_code: ClassVar[str] = "CALC-001"
    status_code: ClassVar[int] = 400

    @property
    def message(self) -> str:
        return (
            f"No factor found for adjusted age {self.adjusted_age} "
            f"in method '{self.method_name}'"
        )


@frozen
class UnexpectedFailure:
    """A calculation failed for a reason outside the business rules.

    Only the exception type is kept; the original message stays in the logs.
    """

    method_name: str = field()
    exception_type: str = field()

    error_code: ClassVar[str] = "GEN-500"
    status_code: ClassVar[int] = 500

    @property
    def message(self) -> str:
        return "An unexpected error occurred."


CalculationError = Union[UnknownMethod, NoFactorFound, UnexpectedFailure]

__all__ = [
    "CalculationError",
    "ConfigurationInvalid",
    "NoFactorFound",
    "UnexpectedFailure",
    "UnknownMethod",
]
