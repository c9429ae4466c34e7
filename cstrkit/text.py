"""String building helpers: slicing, joining, trimming, splitting and mapping."""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, Union

Element = Union[int, str, bytes]


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` at or past the end of ``text`` gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("text and charset must be strings")
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on runs of ``separator``, dropping empty pieces."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if func is None:
        raise TypeError("a mapping function is required")
    return "".join(func(index, char) for index, char in enumerate(text))


def _is_nul(value: Element) -> bool:
    return value == 0 or value == "\0" or value == b"\0"


def striteri(
    buffer: MutableSequence[Element],
    func: Callable[[int, Element], Optional[Element]],
) -> None:
    """Call ``func(index, element)`` on each element up to the first NUL.

    The buffer is changed in place: a value returned by ``func`` replaces
    the element, while None leaves it as it was.
    """
    if isinstance(buffer, (str, bytes)):
        raise TypeError("buffer must be mutable")
    for index, value in enumerate(buffer):
        if _is_nul(value):
            break
        replacement = func(index, value)
        if replacement is not None:
            buffer[index] = replacement