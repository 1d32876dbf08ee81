# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac
from collections.abc import Callable
from functools import wraps

from flask import Flask, request

from storehub.shared.config import SecurityConfig
from storehub.shared.errors import CsrfError
from storehub.shared.security.csrf import generate_csrf_token

SAFE_METHODS: tuple[str, ...] = ("GET", "HEAD", "OPTIONS")
CSRF_COOKIE = "csrf_token"
CSRF_HEADER = "X-CSRF-Token"


def configure_csrf(app: Flask, config: SecurityConfig) -> None:
    if not config.enable_csrf:
        return

    @app.after_request
    def _ensure_csrf_cookie(resp):
        if request.method in SAFE_METHODS and not request.cookies.get(CSRF_COOKIE):
            resp.set_cookie(
                CSRF_COOKIE,
                generate_csrf_token(),
                httponly=False,
                samesite=config.cookie_samesite,
                secure=config.cookie_secure,
                max_age=60 * 60 * 24 * 7,
            )
        return resp


def csrf_protect(config: SecurityConfig) -> Callable[[Callable], Callable]:
    """Double-submit check: header and cookie must carry the same token."""

    def decorator(f: Callable) -> Callable:
        if not config.enable_csrf:
            return f

        @wraps(f)
        def wrapper(*args, **kwargs):
            if request.method in SAFE_METHODS:
                return f(*args, **kwargs)
            header = (request.headers.get(CSRF_HEADER) or "").strip()
            cookie = (request.cookies.get(CSRF_COOKIE) or "").strip()
            if not header or not cookie or not hmac.compare_digest(header, cookie):
                raise CsrfError()
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["CSRF_COOKIE", "CSRF_HEADER", "configure_csrf", "csrf_protect"]
