"""ASCII character classification and case conversion.

Every function takes a character code (an ``int``) or a one-character
string. Only the ASCII ranges are recognised; anything else, negative
codes included, is classified as "not in the class" and left unchanged
by the case converters.
"""

from __future__ import annotations

import operator

_CASE_OFFSET = 32


def _ordinal(code: int | str) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    return operator.index(code)


def _in_range(value: int, low: str, high: str) -> bool:
    return ord(low) <= value <= ord(high)


def is_alpha(code: int | str) -> bool:
    """Return True for the ASCII letters ``a``-``z`` and ``A``-``Z``."""
    value = _ordinal(code)
    return _in_range(value, "a", "z") or _in_range(value, "A", "Z")


def is_digit(code: int | str) -> bool:
    """Return True for the ASCII digits ``0``-``9``."""
    return _in_range(_ordinal(code), "0", "9")


def is_alnum(code: int | str) -> bool:
    """Return True for ASCII letters and digits."""
    return is_digit(code) or is_alpha(code)


def is_ascii(code: int | str) -> bool:
    """Return True for codes 0 to 127 inclusive."""
    return 0 <= _ordinal(code) <= 127


def is_print(code: int | str) -> bool:
    """Return True for printable ASCII, from space to tilde."""
    return _in_range(_ordinal(code), " ", "~")


def to_upper(code: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case.

    The result has the same kind as the argument: a code for a code,
    a character for a character.
    """
    value = _ordinal(code)
    if _in_range(value, "a", "z"):
        value -= _CASE_OFFSET
    return chr(value) if isinstance(code, str) else value


def to_lower(code: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case.

    The result has the same kind as the argument: a code for a code,
    a character for a character.
    """
    value = _ordinal(code)
    if _in_range(value, "A", "Z"):
        value += _CASE_OFFSET
    return chr(value) if isinstance(code, str) else value