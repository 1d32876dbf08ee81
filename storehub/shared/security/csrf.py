# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

CSRF_TOKEN_BYTES = 32


def generate_csrf_token() -> str:
    # 32 bytes from the OS CSPRNG, 64 lowercase hex characters.
    return secrets.token_hex(CSRF_TOKEN_BYTES)


__all__ = ["CSRF_TOKEN_BYTES", "generate_csrf_token"]
