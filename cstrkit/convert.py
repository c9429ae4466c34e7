"""Conversion between 32-bit signed integers and their decimal text."""

from __future__ import annotations

import operator
import re
from typing import Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: Union[str, bytes, bytearray]) -> int:
    """Parse a leading decimal integer the way ``atoi`` does.

    Leading white space is skipped, one ``+`` or ``-`` is accepted, and
    digits are read until the first non-digit. Text without digits gives
    0. The result wraps around to a 32-bit signed integer.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")
    match = _NUMBER.match(text.lstrip(_SPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap32(value)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    number = operator.index(number)
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return f"{number:d}"