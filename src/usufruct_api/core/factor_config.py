# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Startup loading of the factor tables and age adjustment policy."""

from pathlib import Path

from beartype import beartype
from pydantic import ValidationError

from ..models.calculation import FactorConfiguration
from .errors import ConfigurationInvalid
from .logging_utils import get_logger

logger = get_logger(__name__)


@beartype
def parse_factor_configuration(raw: str | bytes, *, source: str = "<memory>") -> FactorConfiguration:
    """Validate a JSON document into a ``FactorConfiguration``.

    Raises:
        ConfigurationInvalid: if the document is malformed or violates a
            table invariant (unknown active version, empty table, inverted
            age band).
    """
    try:
        configuration = FactorConfiguration.model_validate_json(raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationInvalid(problems, source=source) from e

    for method_name, settings in configuration.factor_methods.items():
        logger.info(
            "Loaded factor method %s: active_version=%s rows=%d versions=%s",
            method_name,
            settings.active_version,
            len(settings.active_table),
            sorted(settings.versions),
        )
    return configuration


@beartype
def load_factor_configuration(path: Path) -> FactorConfiguration:
    """Read and validate the factor configuration file at ``path``."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigurationInvalid(f"cannot read factor configuration: {e}", source=str(path)) from e

    return parse_factor_configuration(raw, source=str(path))
