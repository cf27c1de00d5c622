# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Core infrastructure: settings, logging, result and error types."""

from .config import Settings, get_settings
from .errors import ConfigurationInvalid
from .result_types import Err, Ok, Result

__all__ = ["ConfigurationInvalid", "Err", "Ok", "Result", "Settings", "get_settings"]
