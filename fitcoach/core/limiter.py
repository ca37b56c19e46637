"""
Rate limiter configuration.
"""
import math
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from fitcoach.core.logger import log_rejection

# Rate limiter: fixed window per client IP
limiter = Limiter(key_func=get_remote_address, strategy="fixed-window")


def seconds_until_reset(request: Request, exc: RateLimitExceeded) -> int:
    """Seconds left in the client's current window, at least 1."""
    item = exc.limit.limit
    # slowapi records the (limit, identifiers) pair it just hit
    view_limit = getattr(request.state, "view_rate_limit", None)
    if view_limit is None:
        return item.get_expiry()

    reset_at, _remaining = limiter.limiter.get_window_stats(view_limit[0], *view_limit[1])
    return max(math.ceil(reset_at - time.time()), 1)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render a 429 in the service's error shape with retry guidance."""
    retry_after = seconds_until_reset(request, exc)
    log_rejection(request.url.path, f"rate limit {exc.detail} for {get_remote_address(request)}")
    return JSONResponse(
        status_code=429,
        content={"error": f"Too many requests. Please try again in {retry_after} seconds."},
        headers={"Retry-After": str(retry_after)},
    )
