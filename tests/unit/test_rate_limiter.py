"""Unit tests for the per-client rate limiter."""

from unittest.mock import MagicMock

from fastapi import Request

from usufruct_api.core.rate_limiter import ClientRateTracker, RateLimiter, RateLimitRule


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def create_mock_request(host: str | None = "127.0.0.1") -> Request:
    """Create a mock Request object for testing."""
    mock_request = MagicMock(spec=Request)
    if host is None:
        mock_request.client = None
    else:
        mock_request.client = MagicMock()
        mock_request.client.host = host
    return mock_request


class TestClientRateTracker:
    """Sliding window bookkeeping for one client."""

    def test_acquire_until_limit(self) -> None:
        """Requests beyond the limit within the window are refused."""
        rule = RateLimitRule(permit_limit=2, window_seconds=10)
        tracker = ClientRateTracker(client_id="a")

        assert tracker.try_acquire(rule, 0.0)
        assert tracker.try_acquire(rule, 1.0)
        assert not tracker.try_acquire(rule, 2.0)
        assert tracker.remaining(rule) == 0

    def test_old_requests_expire(self) -> None:
        """Requests older than the window no longer count."""
        rule = RateLimitRule(permit_limit=1, window_seconds=10)
        tracker = ClientRateTracker(client_id="a")

        assert tracker.try_acquire(rule, 0.0)
        assert not tracker.try_acquire(rule, 9.0)
        assert tracker.try_acquire(rule, 10.0)


class TestRateLimiter:
    """Partitioning and limits across clients."""

    def test_default_rule(self) -> None:
        """Ten requests per ten seconds."""
        rule = RateLimitRule()

        assert rule.permit_limit == 10
        assert rule.window_seconds == 10

    def test_clients_are_limited_independently(self) -> None:
        """One client exhausting its budget does not affect another."""
        clock = FakeClock()
        limiter = RateLimiter(RateLimitRule(permit_limit=2, window_seconds=10), clock=clock)
        first = create_mock_request("10.0.0.1")
        second = create_mock_request("10.0.0.2")

        assert limiter.check_rate_limit(first)[0]
        assert limiter.check_rate_limit(first)[0]
        allowed, info = limiter.check_rate_limit(first)

        assert not allowed
        assert info["client_id"] == "10.0.0.1"
        assert info["remaining"] == 0
        assert limiter.check_rate_limit(second)[0]

    def test_budget_recovers_after_window(self) -> None:
        """A refused client is admitted again once the window passes."""
        clock = FakeClock()
        limiter = RateLimiter(RateLimitRule(permit_limit=1, window_seconds=10), clock=clock)
        request = create_mock_request()

        assert limiter.check_rate_limit(request)[0]
        assert not limiter.check_rate_limit(request)[0]
        clock.now += 10
        assert limiter.check_rate_limit(request)[0]

    def test_requests_without_client_share_a_partition(self) -> None:
        """Requests with no peer address are grouped together."""
        limiter = RateLimiter(RateLimitRule(permit_limit=1, window_seconds=10), clock=FakeClock())

        _, info = limiter.check_rate_limit(create_mock_request(None))

        assert info["client_id"] == "unknown"
        assert not limiter.check_rate_limit(create_mock_request(None))[0]

    def test_cleanup_inactive_clients(self) -> None:
        """Idle trackers are dropped."""
        clock = FakeClock()
        limiter = RateLimiter(RateLimitRule(), clock=clock)
        limiter.check_rate_limit(create_mock_request("10.0.0.1"))
        clock.now += 7200
        limiter.check_rate_limit(create_mock_request("10.0.0.2"))

        removed = limiter.cleanup_inactive_clients()

        assert removed == 1
        assert list(limiter.clients) == ["10.0.0.2"]
