"""NUL-terminated byte strings: length, bounded copy and append, search, compare.

A C string here is any bytes-like object. Its content ends at the first
NUL byte, or at the end of the buffer when there is none. Positions are
returned as indexes into the buffer, and None stands for "not found".
"""

from __future__ import annotations

import operator
from typing import Optional, Union

Code = Union[int, str, bytes]


def _raw(data) -> bytes:
    return memoryview(data).tobytes()


def _content(data) -> bytes:
    raw = _raw(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _ordinal(code: Code) -> int:
    if isinstance(code, (str, bytes)):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    return operator.index(code)


def _size(value: int, name: str = "size") -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(data) -> int:
    """Return the number of bytes before the first NUL."""
    return len(_content(data))


def strlcpy(dest: bytearray, src, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes with the NUL.

    The copy is truncated to ``size - 1`` bytes and always terminated,
    unless ``size`` is 0, in which case ``dest`` is left alone. Returns
    the length of ``src``, so a result of ``size`` or more means the copy
    was truncated.
    """
    size = _size(size)
    text = _content(src)
    if size == 0:
        return len(text)
    count = min(size - 1, len(text))
    if count >= len(dest):
        raise ValueError(
            f"destination holds {len(dest)} bytes, needs {count + 1}"
        )
    dest[:count] = text[:count]
    dest[count] = 0
    return len(text)


def strlcat(dest: bytearray, src, size: int) -> int:
    """Append ``src`` to the string in ``dest`` within a total of ``size`` bytes.

    Returns the length of the string it tried to build: the initial
    length of ``dest`` plus the length of ``src``. When ``size`` is not
    larger than the current length of ``dest``, nothing is written and
    the length of ``src`` plus ``size`` is returned.
    """
    size = _size(size)
    dest_len = strlen(dest)
    text = _content(src)
    if size <= dest_len:
        return len(text) + size
    count = min(len(text), size - 1 - dest_len)
    end = dest_len + count
    if end >= len(dest):
        raise ValueError(
            f"destination holds {len(dest)} bytes, needs {end + 1}"
        )
    dest[dest_len:end] = text[:count]
    dest[end] = 0
    return dest_len + len(text)


def strchr(data, code: Code) -> Optional[int]:
    """Return the index of the first occurrence of ``code`` in the string.

    Only the low eight bits of ``code`` count. Searching for NUL finds
    the terminator, that is, the index equal to the string's length.
    """
    target = _ordinal(code) & 0xFF
    text = _content(data)
    if target == 0:
        return len(text)
    found = text.find(target)
    return None if found < 0 else found


def strrchr(data, code: Code) -> Optional[int]:
    """Return the index of the last occurrence of ``code`` in the string.

    Only the low eight bits of ``code`` count. Searching for NUL finds
    the terminator.
    """
    target = _ordinal(code) & 0xFF
    text = _content(data)
    if target == 0:
        return len(text)
    found = text.rfind(target)
    return None if found < 0 else found


def _byte_at(data: bytes, index: int) -> int:
    return data[index] if index < len(data) else 0


def strncmp(first, second, length: int) -> int:
    """Compare at most ``length`` bytes of two strings.

    Returns the difference of the first differing bytes, taken as
    unsigned values, or 0 when the compared parts are equal.
    """
    length = _size(length, "length")
    if length == 0:
        return 0
    a = _content(first)
    b = _content(second)
    index = 0
    while (
        index < length - 1
        and _byte_at(a, index)
        and _byte_at(a, index) == _byte_at(b, index)
    ):
        index += 1
    return _byte_at(a, index) - _byte_at(b, index)


def strnstr(haystack, needle, length: int) -> Optional[int]:
    """Find ``needle`` in ``haystack`` where it lies wholly within ``length`` bytes.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    length = _size(length, "length")
    wanted = _content(needle)
    if not wanted:
        return 0
    text = _content(haystack)
    for pos in range(min(len(text), length + 1)):
        if length - pos >= len(wanted) and text.startswith(wanted, pos):
            return pos
    return None


def strdup(data) -> bytes:
    """Return a new copy of the string, without its terminator."""
    return bytes(_content(data))