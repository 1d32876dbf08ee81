from __future__ import annotations

import re

from storehub.shared.security.csrf import generate_csrf_token


def test_token_is_64_lowercase_hex_chars() -> None:
    for _ in range(20):
        assert re.fullmatch(r"[0-9a-f]{64}", generate_csrf_token())


def test_consecutive_tokens_differ() -> None:
    assert generate_csrf_token() != generate_csrf_token()
