# cstrkit

Small helpers for working with character codes, byte buffers and
NUL-terminated byte strings. They follow the behaviour of the classic C
string and memory routines: bounded copies, comparison results that are
byte differences, and whitespace-tolerant integer parsing. Where those
routines would return a pointer, these return an index, and `None` stands
for "not found". Out-of-range spans, negative sizes and similar misuse
raise `ValueError`, `TypeError` or `OverflowError` instead of corrupting
memory.

## Installation

```
pip install cstrkit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "cstrkit[test]"
pytest
```

## Modules

- `cstrkit.chars`: ASCII classification and case mapping. Each function
  takes an integer code or a one-character string (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`). The case
  converters return the same kind they were given.
- `cstrkit.memory`: operations on mutable byte buffers (`memset`, `bzero`,
  `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`). `memmove` takes
  optional offsets, so it can move data within a single buffer.
- `cstrkit.cstring`: routines on bytes-like data whose content ends at the
  first NUL byte (`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `strdup`).
- `cstrkit.convert`: integer parsing and formatting (`atoi`, `itoa`).
  `atoi` wraps its result to a 32-bit signed integer. `itoa` raises
  `OverflowError` outside that range.
- `cstrkit.text`: building new Python strings (`substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`), and `striteri`, which applies a function
  in place to a mutable sequence up to its first NUL element.
- `cstrkit.output`: writing characters, strings and numbers directly to an
  operating-system file descriptor (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`).

## Examples

```python
from cstrkit.chars import to_upper, is_digit
from cstrkit.convert import atoi, itoa
from cstrkit.text import split, strtrim
from cstrkit.memory import calloc, memset
from cstrkit.cstring import strlen, strchr, strlcpy

to_upper(ord("a"))          # 65
to_upper("a")               # "A"
is_digit(ord("7"))          # True

atoi("   -42abc")           # -42
itoa(-2147483648)           # "-2147483648"

split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"

buffer = calloc(4, 2)           # bytearray of 8 zero bytes
memset(buffer, ord("A"), 3)     # first three bytes become b"AAA"

strlen(b"abc\0def")             # 3
strchr(b"hello", "l")           # 2
dest = bytearray(4)
strlcpy(dest, b"abcdef", 4)     # 6; dest is now b"abc\0"
```

The output helpers write straight to a file descriptor:

```python
import sys
from cstrkit.output import putnbr_fd, putendl_fd

putnbr_fd(-123, sys.stdout.fileno())
putendl_fd("", sys.stdout.fileno())
```

## What it does not do

cstrkit is a library only. It has no command-line program.