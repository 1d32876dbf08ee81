# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message or self.code, "code": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


def _resolve(error: AppError, name: str, value: Any, default: Any) -> Any:
    if value is not None:
        return value
    return getattr(error, name, default)


class ValidationError(AppError):
    """Client input rejected; always a 400."""

    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=cast(str, _resolve(self, "code", code, "validation_error")),
            status=HTTPStatus.BAD_REQUEST,
            message=_resolve(self, "message", message, None),
            context=context,
        )


class NotFoundError(AppError):
    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=cast(str, _resolve(self, "code", code, "not_found")),
            status=HTTPStatus.NOT_FOUND,
            message=_resolve(self, "message", message, "Not found"),
            context=context,
        )


class InternalError(AppError):
    """Unexpected failure. The message is generic and safe to show."""

    def __init__(
        self,
        message: str = "Internal server error",
        *,
        code: str = "internal_error",
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
        )


class RateLimitedError(AppError):
    def __init__(self, *, retry_after_ms: int | None = None) -> None:
        context = None
        if retry_after_ms is not None:
            context = {"window_ms": retry_after_ms}
        super().__init__(
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
            message="Too many requests",
            context=context,
        )


class CsrfError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="csrf",
            status=HTTPStatus.FORBIDDEN,
            message="CSRF token missing or invalid",
        )
