"""Byte-buffer primitives: fill, copy, move, search, compare, allocate."""

from __future__ import annotations

import operator
from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_span(name: str, buffer, offset: int, length: int) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if offset + length > len(buffer):
        raise ValueError(
            f"{name} holds {len(buffer)} bytes, "
            f"cannot reach {length} bytes from offset {offset}"
        )


def memset(buffer: bytearray, value: int, length: Optional[int] = None) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value``.

    Only the low eight bits of ``value`` are stored. ``length`` defaults
    to the whole buffer. Returns ``buffer``.
    """
    if length is None:
        length = len(buffer)
    _check_span("buffer", buffer, 0, length)
    byte = operator.index(value) & 0xFF
    buffer[:length] = bytes([byte]) * length
    return buffer


def bzero(buffer: bytearray, length: Optional[int] = None) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def memcpy(dest: Optional[bytearray], src, length: int) -> Optional[bytearray]:
    """Copy ``length`` bytes from the start of ``src`` to the start of ``dest``.

    When both buffers are None there is nothing to copy and None is returned.
    """
    if dest is None and src is None:
        return None
    return memmove(dest, src, length)


def memmove(
    dest: Optional[bytearray],
    src,
    length: int,
    dest_offset: int = 0,
    src_offset: int = 0,
) -> Optional[bytearray]:
    """Copy ``length`` bytes from ``src`` into ``dest``; the regions may overlap.

    ``dest`` and ``src`` may be the same buffer, with the offsets naming
    the two regions. Returns ``dest``, or None when both buffers are None.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both buffers are required")
    _check_span("source", src, src_offset, length)
    _check_span("destination", dest, dest_offset, length)
    chunk = bytes(src[src_offset:src_offset + length])
    dest[dest_offset:dest_offset + length] = chunk
    return dest


def memchr(data, value: int, length: Optional[int] = None) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``data[:length]``.

    Only the low eight bits of ``value`` are compared. Returns None when
    the byte does not occur.
    """
    if length is None:
        length = len(data)
    _check_span("data", data, 0, length)
    byte = operator.index(value) & 0xFF
    found = bytes(data[:length]).find(byte)
    return None if found < 0 else found


def memcmp(first, second, length: int) -> int:
    """Compare the first ``length`` bytes of two buffers.

    Returns the difference between the first pair of bytes that differ,
    as unsigned values, or 0 when the spans are equal.
    """
    _check_span("first", first, 0, length)
    _check_span("second", second, 0, length)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError(f"{count} x {size} bytes exceeds the addressable size")
    return bytearray(total)