# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""HTTP middleware for request correlation."""

from .correlation import CORRELATION_HEADER, CorrelationIdMiddleware, resolve_correlation_id

__all__ = ["CORRELATION_HEADER", "CorrelationIdMiddleware", "resolve_correlation_id"]
