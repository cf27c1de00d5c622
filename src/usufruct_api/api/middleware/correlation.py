# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Correlation id propagation for every HTTP request.

The inbound ``X-Correlation-Id`` header is reused when it holds a UUID,
otherwise a new one is generated. The id is exposed on ``request.state``,
bound to the logging context and echoed on the response.
"""

from collections.abc import Awaitable, Callable
from uuid import UUID, uuid4

from beartype import beartype
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...core.logging_utils import correlation_scope

CORRELATION_HEADER = "X-Correlation-Id"


@beartype
def resolve_correlation_id(header_value: str | None) -> str:
    """Return the header value as a canonical UUID, or a fresh one."""
    if not header_value:
        return str(uuid4())
    try:
        return str(UUID(header_value.strip()))
    except ValueError:
        return str(uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation id and a trace id to each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = resolve_correlation_id(request.headers.get(CORRELATION_HEADER))
        request.state.correlation_id = correlation_id
        request.state.trace_id = uuid4().hex

        with correlation_scope(correlation_id):
            response = await call_next(request)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
