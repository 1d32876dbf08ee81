from .base import (
    AppError,
    CsrfError,
    InternalError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "CsrfError",
    "InternalError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
