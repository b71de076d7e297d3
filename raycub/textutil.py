"""Small text helpers: lenient integer parsing and word splitting."""

from __future__ import annotations

import re

_U64 = (1 << 64) - 1
_OVERFLOW_LIMIT = 18446744073709551
_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the lenient way.

    Leading whitespace and one sign are allowed, and parsing stops at the
    first non-digit.  Text without digits gives 0.  Values too large to
    hold give -1, or 0 when negative; other results wrap to a signed
    32-bit integer.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    result = 0
    for digit in digits:
        result = (result * 10 + int(digit)) & _U64
    if result > _OVERFLOW_LIMIT:
        return 0 if sign == "-" else -1
    if sign == "-":
        result = -result
    return _to_int32(result)


def split_words(text: str, sep: str) -> list[str]:
    """Split text on a separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]