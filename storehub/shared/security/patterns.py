# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final, Literal

from .sanitizer import trim

PatternKind = Literal["username", "email", "password", "phone", "url"]

VALIDATION_PATTERNS: Final[Mapping[str, re.Pattern[str]]] = MappingProxyType(
    {
        "username": re.compile(r"[a-zA-Z0-9_-]{3,20}"),
        "email": re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+"),
        # Minimum 8 characters, no upper bound. Line terminators never match.
        "password": re.compile(r"[^\n\r\u2028\u2029]{8,}"),
        "phone": re.compile(r"\+?[1-9][0-9]{1,14}"),
        "url": re.compile(
            r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
            r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)"
        ),
    }
)


def validate_input(value: Any, kind: PatternKind) -> bool:
    """Return True when ``value`` fully matches the ``kind`` rule after trimming.

    Non-string and empty values are rejected rather than raising. An unknown
    ``kind`` raises ``KeyError``.
    """
    pattern = VALIDATION_PATTERNS[kind]
    if not value or not isinstance(value, str):
        return False
    return pattern.fullmatch(trim(value)) is not None


__all__ = ["PatternKind", "VALIDATION_PATTERNS", "validate_input"]
