"""Arbitrary-radix integer codec (bases 2 to 36)."""
from __future__ import annotations

import string

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = string.digits + string.ascii_uppercase
_DIGIT_VALUES = {char: value for value, char in enumerate(_ALPHABET)}


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer in {MIN_BASE}..{MAX_BASE}, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base must be {MIN_BASE}..{MAX_BASE}, got {base}")


def decode(digits: str, base: int) -> int:
    """Decode ``digits`` written in ``base`` into an exact integer.

    Letters are case-insensitive. Unlike :func:`int`, no sign, whitespace,
    underscore or prefix is accepted: every character must be a digit.
    """
    _check_base(base)
    if not digits:
        raise InvalidDigit(f"Empty digit string for base {base}")

    result = 0
    place = 1
    for position in range(len(digits) - 1, -1, -1):
        char = digits[position]
        value = _DIGIT_VALUES.get(char.upper())
        if value is None or value >= base:
            raise InvalidDigit(f"Invalid digit {char!r} at position {position} for base {base}")
        result += value * place
        place *= base
    return result


def encode(number: int, base: int) -> str:
    """Render a non-negative integer in ``base`` using uppercase digits."""
    _check_base(base)
    if number < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if number == 0:
        return "0"
    chars: list[str] = []
    while number:
        number, value = divmod(number, base)
        chars.append(_ALPHABET[value])
    return "".join(reversed(chars))


__all__ = ["MIN_BASE", "MAX_BASE", "decode", "encode"]
