"""Rate Limiter — fixed windows per identifier."""

import pytest

from deliberate.core.errors import RateLimitedError
from deliberate.infrastructure.rate_limiter import RateLimiter, RateLimitPolicy


def test_session_window_exhausts():
    limiter = RateLimiter(RateLimitPolicy(session_max=3))
    for _ in range(3):
        limiter.check("s1")
    with pytest.raises(RateLimitedError) as exc:
        limiter.check("s1")
    assert exc.value.identifier == "session:s1"
    assert exc.value.context.retry_after_ms >= 0
    assert exc.value.to_tool_result()["error"]["code"] == "RATE_LIMITED"


def test_sessions_are_independent():
    limiter = RateLimiter(RateLimitPolicy(session_max=1))
    limiter.check("s1")
    limiter.check("s2")
    with pytest.raises(RateLimitedError):
        limiter.check("s1")


def test_global_window_applies_without_session():
    limiter = RateLimiter(RateLimitPolicy(global_max=2))
    limiter.check()
    limiter.check("s1")
    with pytest.raises(RateLimitedError) as exc:
        limiter.check("s2")
    assert exc.value.identifier == "global"


def test_rejected_call_records_no_hits():
    limiter = RateLimiter(RateLimitPolicy(session_max=5, analysis_max=1))
    limiter.check("s1", is_analysis=True)
    with pytest.raises(RateLimitedError):
        limiter.check("s1", is_analysis=True)
    assert limiter.remaining("s1")["session"] == 4


def test_reset_clears_windows():
    limiter = RateLimiter(RateLimitPolicy(session_max=1))
    limiter.check("s1")
    limiter.reset()
    limiter.check("s1")
