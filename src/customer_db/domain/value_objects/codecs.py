"""Scalar field codecs.

Every codec here follows the same contract: input text is normalized to a
value in the field's domain and never rejected. Integer scanning mirrors the
C library behaviour the command language was written against: leading
whitespace is skipped, a sign is optional, and trailing garbage is ignored.
"""

from __future__ import annotations

import re

ASCII_WHITESPACE = " \t\n\r\v\f"

NULL_TEXT = "null"
"""Stored in place of an absent or empty name/mail."""

# ASCII digits only, like a C %d scan.
_INT_PREFIX = re.compile(r"[ \t\n\r\v\f]*([+-]?[0-9]+)")


def parse_int_prefix(text: str | None) -> int | None:
    """Scan a leading integer.

    Args:
        text: Text whose prefix may hold an integer.

    Returns:
        The integer, or None when the text has no leading digits.

    Example:
        >>> parse_int_prefix("  42abc")
        42
        >>> parse_int_prefix("abc") is None
        True
    """
    if not text:
        return None
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1))


def atoi(text: str | None) -> int:
    """Like parse_int_prefix, but 0 when nothing can be scanned."""
    value = parse_int_prefix(text)
    return 0 if value is None else value


def text_or_null(text: str | None) -> str:
    """Return the text, or the literal "null" when it is absent or empty."""
    if text is None or text == "":
        return NULL_TEXT
    return text


def parse_flag(text: str | None) -> bool:
    """Decode the email-verified flag.

    Accepts the literals ``true`` and ``false`` (case-sensitive) and
    otherwise falls back to integer scanning, where any non-zero value is
    true. Absent, empty and non-numeric text decode to False.
    """
    if text == "true":
        return True
    if text == "false":
        return False
    return atoi(text) != 0
