"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import operator
import os
from typing import Union

from cstrkit.convert import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(text: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise TypeError(f"expected text or bytes, got {type(text).__name__}")


def putchar_fd(char: Union[int, str, bytes], fd: int) -> None:
    """Write one character to ``fd``.

    An integer is written as a single byte from its low eight bits.
    """
    if isinstance(char, (str, bytes, bytearray)):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        data = _encode(char)
    else:
        data = bytes([operator.index(char) & 0xFF])
    _write_all(fd, data)


def putstr_fd(text: Union[str, bytes], fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, _encode(text))


def putendl_fd(text: Union[str, bytes], fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, _encode(text) + b"\n")


def putnbr_fd(number: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    _write_all(fd, itoa(number).encode("ascii"))