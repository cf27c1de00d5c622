# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Registry resolving factor method names to calculation methods.

Methods are registered explicitly in ``METHOD_TYPES``. Adding a method
means writing a ``CalculationMethod`` subclass, listing it there and
giving it a settings block in the factor configuration; dispatch code
does not change.
"""

from collections.abc import Iterable
from typing import Final

from beartype import beartype

from ..core.errors import ConfigurationInvalid, UnknownMethod
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok
from ..models.calculation import FactorConfiguration
from .methods import CalculationMethod, SingleLifeUsufructMethod

logger = get_logger(__name__)

METHOD_TYPES: Final = (SingleLifeUsufructMethod,)


class MethodRegistry:
    """Immutable, case-insensitive mapping of method names to methods."""

    def __init__(self, methods: Iterable[CalculationMethod]) -> None:
        """Index ``methods`` by name.

        Raises:
            ConfigurationInvalid: if two methods share a name, ignoring case.
        """
        index: dict[str, CalculationMethod] = {}
        for method in methods:
            key = method.name.casefold()
            if key in index:
                raise ConfigurationInvalid(
                    f"duplicate factor method name '{method.name}' "
                    f"(already registered as '{index[key].name}')"
                )
            index[key] = method
        self._methods = index

    def __len__(self) -> int:
        return len(self._methods)

    def __contains__(self, method_name: object) -> bool:
        return isinstance(method_name, str) and method_name.casefold() in self._methods

    @property
    def names(self) -> list[str]:
        """Canonical names of every registered method."""
        return sorted(method.name for method in self._methods.values())

    @property
    def methods(self) -> tuple[CalculationMethod, ...]:
        return tuple(self._methods.values())

    @beartype
    def resolve(
        self, method_name: str, correlation_id: str
    ) -> Ok[CalculationMethod] | Err[UnknownMethod]:
        """Look up the method registered under ``method_name``."""
        method = self._methods.get(method_name.casefold())
        if method is None:
            logger.warning(
                "Unknown factor method requested: %s",
                method_name,
                extra={"correlation_id": correlation_id, "method": method_name},
            )
            return Err(UnknownMethod(method_name=method_name))

        logger.info(
            "Factor method selected: %s",
            method.name,
            extra={"correlation_id": correlation_id, "method": method.name},
        )
        return Ok(method)


@beartype
def build_registry(configuration: FactorConfiguration) -> MethodRegistry:
    """Instantiate every registered method with its configured settings.

    Raises:
        ConfigurationInvalid: if a registered method has no settings block.
    """
    methods: list[CalculationMethod] = []
    for method_type in METHOD_TYPES:
        settings = configuration.factor_methods.get(method_type.name)
        if settings is None:
            raise ConfigurationInvalid(
                f"no factor table configured for method '{method_type.name}'"
            )
        methods.append(method_type(settings, configuration.age_adjustment))

    unused = set(configuration.factor_methods) - {t.name for t in METHOD_TYPES}
    if unused:
        logger.warning("Factor tables configured for unregistered methods: %s", sorted(unused))

    return MethodRegistry(methods)
