# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, g, request

from storehub.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

_HASHED_HEADERS = frozenset(
    {"authorization", "cookie", "x-api-key", "x-auth-token", "x-csrf-token"}
)
_REDACTED_PARAM_PARTS = ("password", "token", "key", "secret", "auth", "csrf")


def _client_ip() -> str:
    return request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<hashed:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _safe_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: _fingerprint(value) if name.lower() in _HASHED_HEADERS else value
        for name, value in headers.items()
    }


def _safe_params(params: Mapping[str, str]) -> dict[str, str]:
    return {
        name: "<redacted>" if any(part in name.lower() for part in _REDACTED_PARAM_PARTS) else value
        for name, value in params.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start() -> None:
        g.correlation_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_urlsafe(8)
        g.request_started = time.perf_counter()
        set_correlation_id(g.correlation_id)

        if debug_mode:
            logger.info(
                f"Request started: {request.method} {request.path} from {_client_ip()}, "
                f"query={_safe_params(request.args)}, "
                f"headers={_safe_headers(request.headers)}, "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _finish(response):
        elapsed = time.perf_counter() - g.get("request_started", time.perf_counter())
        logger.info(
            f"Response: {request.method} {request.path} "
            f"status={response.status_code}, duration={elapsed:.3f}s"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, g.get("correlation_id", "-"))
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"Request error: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
