"""Lenient number parsing and strict validation of numeric arguments."""

import re

_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")
_VALID = re.compile(r"[ \t\n\v\f\r]*\+*[0-9]+")

_WORD = 1 << 64
_HALF_WORD = 1 << 63


def parse_long(text):
    """Parse a leading integer the way ``atol`` does, wrapping to a signed 64-bit value.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first character that is not a digit. No digits yields 0.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest.startswith(("+", "-")):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    magnitude = int(digits) % _WORD if digits else 0
    value = (sign * magnitude) % _WORD
    if value >= _HALF_WORD:
        value -= _WORD
    return value


def is_valid_number(text):
    """Return True if ``text`` is optional whitespace, any '+' signs, then only digits."""
    return _VALID.fullmatch(text) is not None