# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re

from markupsafe import escape

_TAG_RE = re.compile(r"<[^>]*>")

# ECMAScript WhiteSpace and LineTerminator code points. Unlike str.strip()
# this includes U+FEFF and excludes U+001C..U+001F and U+0085.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def strip_tags(text: str) -> str:
    """Remove ``<...>`` substrings and trim.

    A heuristic, not an HTML parser: an unterminated ``<`` is left as is.
    """
    return trim(_TAG_RE.sub("", text))


def sanitize_html(text: str) -> str:
    """Entity-encode ``text`` so markup renders literally when embedded in HTML."""
    return str(escape(text))


__all__ = ["TRIM_CHARS", "sanitize_html", "strip_tags", "trim"]
