from __future__ import annotations

import pytest

from storehub.shared.security.patterns import VALIDATION_PATTERNS, validate_input


@pytest.mark.parametrize(
    "value",
    ["abc", "valid_user", "user-name_01", "A" * 20, "  padded_ok  ", "___", "a-b"],
)
def test_username_accepts_allowed_charset_and_length(value: str) -> None:
    assert validate_input(value, "username") is True


@pytest.mark.parametrize(
    "value",
    ["ab", "a" * 21, "has space", "semi;colon", "testalert(1)", "ümlaut", "dot.name", "x@y"],
)
def test_username_rejects_bad_length_or_charset(value: str) -> None:
    assert validate_input(value, "username") is False


@pytest.mark.parametrize("value", [None, "", 42, ["valid_user"], b"valid_user"])
def test_non_string_or_empty_input_is_rejected(value: object) -> None:
    assert validate_input(value, "username") is False  # type: ignore[arg-type]


def test_password_only_checks_length() -> None:
    assert validate_input("12345678", "password") is True
    assert validate_input("<>!@#$%^&*()", "password") is True
    assert validate_input("x" * 500, "password") is True
    assert validate_input("1234567", "password") is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("user@example.com", True),
        ("a@b.c", True),
        ("no-at-sign.com", False),
        ("two@@example.com", False),
        ("user@nodot", False),
        ("sp ace@example.com", False),
    ],
)
def test_email_pattern(value: str, expected: bool) -> None:
    assert validate_input(value, "email") is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("+14155552671", True),
        ("79991234567", True),
        ("12", True),
        ("1", False),
        ("+0123456", False),
        ("1234567890123456", False),
        ("+1-415-555", False),
    ],
)
def test_phone_pattern(value: str, expected: bool) -> None:
    assert validate_input(value, "phone") is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("https://example.com", True),
        ("http://www.example.org/path?q=1#frag", True),
        ("https://sub.domain.io/a/b", True),
        ("ftp://example.com", False),
        ("example.com", False),
        ("https://nodot", False),
    ],
)
def test_url_pattern(value: str, expected: bool) -> None:
    assert validate_input(value, "url") is expected


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        VALIDATION_PATTERNS["username"] = VALIDATION_PATTERNS["email"]  # type: ignore[index]


def test_unknown_kind_raises() -> None:
    with pytest.raises(KeyError):
        validate_input("value", "zipcode")  # type: ignore[arg-type]


def test_username_trimming_matches_javascript() -> None:
    assert validate_input("\ufeffvalid_user", "username") is True
    assert validate_input("abc\x1f", "username") is False


def test_password_rejects_line_terminators() -> None:
    assert validate_input("longenough\u2028pass", "password") is False
    assert validate_input("longenough\rpass", "password") is False
    assert validate_input("longenough\tpass", "password") is True
