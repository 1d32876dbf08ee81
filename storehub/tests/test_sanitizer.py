from __future__ import annotations

import pytest

from storehub.shared.security.sanitizer import sanitize_html, strip_tags, trim


def test_strip_tags_removes_markup_and_trims() -> None:
    assert strip_tags("test<script>alert(1)</script>") == "testalert(1)"
    assert strip_tags("  <b>bold</b> text ") == "bold text"


def test_strip_tags_leaves_unterminated_tag() -> None:
    assert strip_tags("name<script") == "name<script"


@pytest.mark.parametrize("value", ["plain", "  spaced  ", "a > b", "x<y>z", ""])
def test_strip_tags_is_idempotent(value: str) -> None:
    once = strip_tags(value)
    assert strip_tags(once) == once


def test_sanitize_html_escapes_markup_characters() -> None:
    escaped = sanitize_html("<img src=\"x\" onerror='alert(1)'> & co")
    assert "<" not in escaped and ">" not in escaped
    assert escaped.startswith("&lt;img src=")
    assert "&amp; co" in escaped
    assert '"' not in escaped and "'" not in escaped


def test_sanitize_html_keeps_plain_text() -> None:
    assert sanitize_html("hello world") == "hello world"


def test_trim_follows_javascript_whitespace() -> None:
    assert trim("\ufeff\u00a0 valid_user \u2028\u3000") == "valid_user"
    # Information separators are not whitespace for a JavaScript trim
    assert trim("abc\x1f") == "abc\x1f"
    assert trim("\x85abc") == "\x85abc"


def test_strip_tags_trims_byte_order_mark() -> None:
    assert strip_tags("\ufeff<i>valid_user</i>") == "valid_user"
