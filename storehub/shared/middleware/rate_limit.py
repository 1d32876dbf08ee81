# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from flask import Request, request

from storehub.shared.config import SecurityConfig
from storehub.shared.errors import RateLimitedError
from storehub.shared.logging import logger
from storehub.shared.security.rate_limiter import SlidingWindowRateLimiter


def client_key(req: Request) -> str:
    # remote_addr only; proxy headers are applied by ProxyFix when TRUSTED_PROXIES > 0
    return req.remote_addr or "unknown"


def rate_limit(
    limiter: SlidingWindowRateLimiter,
    config: SecurityConfig,
) -> Callable[[Callable], Callable]:
    max_attempts = config.rate_limit_requests
    window_ms = config.rate_limit_window_ms

    def decorator(f: Callable) -> Callable:
        if not config.enable_rate_limit:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            key = f"{request.method}:{request.path}:{client_key(request)}"
            if not limiter.is_allowed(key, max_attempts, window_ms):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError(retry_after_ms=window_ms)
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["client_key", "rate_limit"]
