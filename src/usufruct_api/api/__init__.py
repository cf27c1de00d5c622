# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""FastAPI API layer for the usufruct calculation service.

This package provides the HTTP endpoints, middleware and problem details
error handling around the calculation service.
"""

__all__: list[str] = []
