# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .csrf import generate_csrf_token
from .patterns import VALIDATION_PATTERNS, PatternKind, validate_input
from .rate_limiter import SlidingWindowRateLimiter
from .sanitizer import sanitize_html, strip_tags, trim

__all__ = [
    "PatternKind",
    "SlidingWindowRateLimiter",
    "VALIDATION_PATTERNS",
    "generate_csrf_token",
    "sanitize_html",
    "strip_tags",
    "trim",
    "validate_input",
]
