# libft

Helpers that behave like the classic C character, memory and string routines,
together with a singly linked list and a buffered line reader for file
descriptors. Pure Python, no dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
`to_upper`. Each takes an integer code or a one-character string and recognises
only the ASCII ranges. The case converters return the same kind they were
given, so `to_upper("a")` is `"A"` and `to_upper(97)` is `65`.

### `libft.memory`

`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp` and `calloc` work on
bytes-like objects. Destinations must be writable (`bytearray` or a writable
`memoryview`). A length that reaches past a buffer, or a negative one, raises
`ValueError`. `memchr` returns an index or `None`. `memcmp` returns the
difference of the first unequal bytes. `calloc(count, size)` returns a zeroed
`bytearray` and raises `OverflowError` when `count * size` would exceed a
64-bit size.

### `libft.strings`

`strlen`, `strchr`, `strcmp`, `strncmp`, `strnstr`, `strdup`, `strlcpy`,
`strlcat`, `strcpy` and `strcat`. The read-only functions accept `str` or
bytes-like values and stop at the first NUL. Positions come back as indexes,
or `None` where nothing is found. The writing functions take a writable byte
buffer as destination, encode a `str` source as UTF-8 and keep the destination
NUL-terminated. `strlcpy` and `strlcat` return the length they tried to build,
so truncation can be detected.

### `libft.transform`

- `atoi` parses a leading integer after whitespace and one optional sign. The
  result wraps to a 32-bit signed value.
- `itoa` returns the decimal text of an integer.
- `split` drops empty pieces.
- `substr`, `strjoin`, `fstrjoin` and `strtrim` build new strings.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(s, f)` walks a `bytearray` or a list of characters in place.

`strjoin` treats a missing argument as absent. `fstrjoin` returns `None` if
either argument is missing.

### `libft.output`

`put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd` write to a raw file
descriptor with `os.write`. Strings are written up to their first NUL.

### `libft.linkedlist`

`Node` holds `content` and `next`. `LinkedList` wraps a head node and offers:

- `push_front` and `push_back`, which ignore `None`
- `last`
- `len()` and iteration over contents
- `clear(delete)`, which passes each content to `delete`
- `for_each(f)`
- `map(f, delete)`, which returns a new list. If `f` raises, the partial
  result is cleared with `delete` and the exception propagates.

### `libft.line_reader`

`LineReader(buffer_size=8, max_fd=1024).next_line(fd)` returns the next line as
`bytes`, newline included, or `None`. It returns `None` at end of input, after a
read error, and for a descriptor outside `0..max_fd`. Leftover bytes are kept
in one buffer that every descriptor shares. `get_next_line(fd)` uses a shared
default reader.

## Example

```python
import os
import sys

from libft.line_reader import get_next_line
from libft.strings import strchr
from libft.transform import atoi, itoa, split, strtrim

atoi("   -42abc")              # -42
itoa(-666)                     # "-666"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxabcxx", "x")        # "abc"
strchr("hello", "l")           # 2

fd = os.open("notes.txt", os.O_RDONLY)
while (line := get_next_line(fd)) is not None:
    sys.stdout.write(line.decode("utf-8"))
os.close(fd)
```

## Not included

This is a library only. It provides no command-line program.