"""Lenient decimal number parsing for command-line values."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def atof(text: str) -> float:
    """Parse a leading decimal number, ignoring anything after it.

    Accepts leading whitespace, an optional sign, integer digits and an
    optional fractional part. No exponent is recognised; text without a
    number yields 0.0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1.0
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1.0
        pos += 1
    integer_part = 0.0
    while pos < length and text[pos] in _DIGITS:
        integer_part = integer_part * 10.0 + _DIGITS.index(text[pos])
        pos += 1
    result = integer_part
    if pos < length and text[pos] == ".":
        pos += 1
        fraction = 0.0
        divisor = 10.0
        while pos < length and text[pos] in _DIGITS:
            fraction += _DIGITS.index(text[pos]) / divisor
            divisor *= 10.0
            pos += 1
        result += fraction
    return result * sign