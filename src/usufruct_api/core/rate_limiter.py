# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Per-client rate limiting middleware."""

import time
from collections import deque
from collections.abc import Awaitable, Callable
from typing import Any

from attrs import define, field, frozen
from beartype import beartype
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .logging_utils import get_logger

logger = get_logger(__name__)

# Trackers idle for longer than this are dropped on the next sweep.
_INACTIVE_CLIENT_SECONDS = 3600
_SWEEP_THRESHOLD = 10_000


@frozen
class RateLimitRule:
    """Immutable rate limiting rule: ``permit_limit`` requests per window."""

    permit_limit: int = field(default=10)
    window_seconds: int = field(default=10)


@define
class ClientRateTracker:
    """Track request timestamps for a specific client."""

    client_id: str = field()
    requests: deque[float] = field(factory=deque)
    last_request_time: float = field(default=0.0)

    @beartype
    def cleanup_old_requests(self, current_time: float, window_seconds: int) -> None:
        """Remove requests older than the tracking window."""
        cutoff = current_time - window_seconds
        while self.requests and self.requests[0] <= cutoff:
            self.requests.popleft()

    @beartype
    def try_acquire(self, rule: RateLimitRule, current_time: float) -> bool:
        """Record a request if the client is still under its limit."""
        self.cleanup_old_requests(current_time, rule.window_seconds)
        if len(self.requests) >= rule.permit_limit:
            return False
        self.requests.append(current_time)
        self.last_request_time = current_time
        return True

    def remaining(self, rule: RateLimitRule) -> int:
        return max(0, rule.permit_limit - len(self.requests))


class RateLimiter:
    """In-memory rate limiter partitioned by client address."""

    def __init__(self, rule: RateLimitRule, clock: Callable[[], float] = time.monotonic) -> None:
        self.rule = rule
        self.clients: dict[str, ClientRateTracker] = {}
        self._clock = clock

    @beartype
    def _get_client_id(self, request: Request) -> str:
        """Extract the partition key from the request."""
        if request.client and request.client.host:
            return request.client.host
        return "unknown"

    @beartype
    def _get_client_tracker(self, client_id: str) -> ClientRateTracker:
        """Get or create client rate tracker."""
        if client_id not in self.clients:
            if len(self.clients) >= _SWEEP_THRESHOLD:
                self.cleanup_inactive_clients()
            self.clients[client_id] = ClientRateTracker(client_id=client_id)
        return self.clients[client_id]

    @beartype
    def check_rate_limit(self, request: Request) -> tuple[bool, dict[str, Any]]:
        """Check whether ``request`` may proceed and record it if so."""
        client_id = self._get_client_id(request)
        tracker = self._get_client_tracker(client_id)
        allowed = tracker.try_acquire(self.rule, self._clock())

        rate_info = {
            "client_id": client_id,
            "limit": self.rule.permit_limit,
            "remaining": tracker.remaining(self.rule),
            "window_seconds": self.rule.window_seconds,
        }
        return allowed, rate_info

    @beartype
    def cleanup_inactive_clients(
        self, inactive_threshold_seconds: int = _INACTIVE_CLIENT_SECONDS
    ) -> int:
        """Drop idle client trackers to keep memory bounded."""
        cutoff_time = self._clock() - inactive_threshold_seconds
        inactive_clients = [
            client_id
            for client_id, tracker in self.clients.items()
            if tracker.last_request_time < cutoff_time
        ]
        for client_id in inactive_clients:
            del self.clients[client_id]
        return len(inactive_clients)


class RateLimitingMiddleware(BaseHTTPMiddleware):
    """Reject clients exceeding their request budget with 429."""

    def __init__(
        self, app: Any, rule: RateLimitRule | None = None, enabled: bool = True
    ) -> None:
        """Initialize rate limiting middleware."""
        super().__init__(app)
        self.enabled = enabled
        self.rate_limiter = RateLimiter(rule or RateLimitRule()) if enabled else None

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Apply rate limiting to incoming requests."""
        if not self.enabled or self.rate_limiter is None:
            return await call_next(request)

        allowed, rate_info = self.rate_limiter.check_rate_limit(request)
        if not allowed:
            correlation_id = getattr(request.state, "correlation_id", None)
            logger.warning(
                "Rate limit exceeded: client=%s limit=%d window=%ds path=%s",
                rate_info["client_id"],
                rate_info["limit"],
                rate_info["window_seconds"],
                request.url.path,
            )
            return JSONResponse(
                status_code=429,
                content={
                    "error": "Too many requests. Please wait and try again.",
                    "errorCode": "RATE-429",
                    "traceId": getattr(request.state, "trace_id", None),
                    "correlationId": correlation_id,
                },
                headers={
                    "Retry-After": str(rate_info["window_seconds"]),
                    "X-RateLimit-Limit": str(rate_info["limit"]),
                    "X-RateLimit-Remaining": "0",
                },
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(rate_info["limit"])
        response.headers["X-RateLimit-Remaining"] = str(rate_info["remaining"])
        return response
