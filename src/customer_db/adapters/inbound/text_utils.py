"""Text helpers shared by the command and seed parsers.

Tokens may be wrapped in plain double quotes or in typographic quotes
(U+201C ... U+201D). Inside such a quote region commas and closing
parentheses are part of the token.
"""

from __future__ import annotations

from customer_db.domain.value_objects import ASCII_WHITESPACE

PLAIN_QUOTE = '"'
OPEN_CURLY_QUOTE = "“"
CLOSE_CURLY_QUOTE = "”"

QUOTE_CHARS = frozenset((PLAIN_QUOTE, OPEN_CURLY_QUOTE, CLOSE_CURLY_QUOTE))

TOKEN_DELIMITERS = frozenset((",", ")"))


def trim(text: str | None) -> str:
    """Strip leading and trailing ASCII whitespace."""
    if not text:
        return ""
    return text.strip(ASCII_WHITESPACE)


def strip_quotes(text: str) -> str:
    """Remove one wrapping pair of quotes, if present.

    Only a pair of plain double quotes or an opening/closing pair of curly
    quotes counts; mismatched marks are left alone, and only the outermost
    pair is removed.

    Example:
        >>> strip_quotes('"Smith, John"')
        'Smith, John'
        >>> strip_quotes('""x""')
        '"x"'
    """
    if len(text) < 2:
        return text
    if text[0] == PLAIN_QUOTE and text[-1] == PLAIN_QUOTE:
        return text[1:-1]
    if text[0] == OPEN_CURLY_QUOTE and text[-1] == CLOSE_CURLY_QUOTE:
        return text[1:-1]
    return text


def normalize_token(text: str | None) -> str:
    """Trim a raw token and strip its wrapping quotes."""
    return strip_quotes(trim(text))


def scan_token_end(text: str, start: int) -> int:
    """Find where the token beginning at start ends.

    The token ends at the first comma or closing parenthesis that is not
    inside a quote region, or at the end of text. Any quote mark toggles
    the region.

    Returns:
        Index of the terminating delimiter, or len(text).
    """
    in_quotes = False
    pos = start
    while pos < len(text):
        char = text[pos]
        if char in QUOTE_CHARS:
            in_quotes = not in_quotes
        elif not in_quotes and char in TOKEN_DELIMITERS:
            return pos
        pos += 1
    return pos


def split_quoted_list(text: str, max_tokens: int) -> list[str]:
    """Split a parenthesised, comma-separated value list.

    A single leading ``(`` is skipped. Scanning stops at an unquoted ``)``,
    at the end of text, or once max_tokens tokens were read. Tokens are
    returned normalized (trimmed and quote-stripped); empty tokens are kept
    as empty strings so positions are preserved.

    Example:
        >>> split_quoted_list('("Smith, John", j@x.com, 1)', 5)
        ['Smith, John', 'j@x.com', '1']
    """
    tokens: list[str] = []
    pos = 1 if text.startswith("(") else 0

    while pos < len(text) and text[pos] != ")" and len(tokens) < max_tokens:
        end = scan_token_end(text, pos)
        tokens.append(normalize_token(text[pos:end]))
        pos = end
        if pos < len(text) and text[pos] == ",":
            pos += 1

    return tokens
