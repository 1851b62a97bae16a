"""NUL-terminated string helpers.

Read-only functions accept ``str`` or bytes-like values and treat the first
NUL character as the end of the string, as a C string would. Positions are
returned as indexes, or ``None`` where nothing is found.

Functions that write (``strlcpy``, ``strlcat``, ``strcpy``, ``strcat``) take
a writable byte buffer as destination and keep its contents NUL-terminated.
A ``str`` source is encoded as UTF-8, and lengths they report count bytes.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import List, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]
Buffer = Union[bytearray, memoryview]


def _cstr(s: Text) -> Union[str, bytes]:
    """Return the part of ``s`` before its first NUL."""
    if isinstance(s, str):
        end = s.find("\0")
        return s if end < 0 else s[:end]
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(s)
        end = data.find(0)
        return data if end < 0 else data[:end]
    raise TypeError(f"expected str or bytes-like, got {type(s).__name__}")


def _codes(s: Text) -> List[int]:
    text = _cstr(s)
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c & 0xFF


def _src_bytes(src: Text) -> bytes:
    text = _cstr(src)
    return text.encode("utf-8") if isinstance(text, str) else text


def _check_size(size: int, dst: Buffer) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of size {len(dst)}")


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(s))


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    target = _char_code(c)
    codes = _codes(s)
    for index, code in enumerate(codes):
        if code == target:
            return index
    return len(codes) if target == 0 else None


def strcmp(s1: Optional[Text], s2: Text) -> int:
    """Compare two strings; return the difference of the first unequal codes.

    A missing first string compares as greater (returns 1).
    """
    if s1 is None:
        return 1
    for x, y in zip_longest(_codes(s1), _codes(s2), fillvalue=0):
        if x != y:
            return x - y
    return 0


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for x, y in islice(pairs, n):
        if x != y:
            return x - y
    return 0


def strnstr(big: Optional[Text], little: Text, length: int) -> Optional[int]:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    Returns the index of the match, 0 for an empty ``little``, or None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if big is None:
        if length == 0 or strlen(little) == 0:
            return None
        raise TypeError("big must not be None when length is positive")
    needle = _cstr(little)
    if not needle:
        return 0
    haystack = _cstr(big)
    if isinstance(haystack, str) != isinstance(needle, str):
        haystack_codes = _codes(haystack)[:length]
        needle_codes = _codes(needle)
        span = len(needle_codes)
        for start in range(len(haystack_codes) - span + 1):
            if haystack_codes[start:start + span] == needle_codes:
                return start
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(s: Text) -> Union[str, bytes, bytearray]:
    """Return a copy of ``s`` up to its first NUL, of the same kind."""
    text = _cstr(s)
    if isinstance(s, bytearray):
        return bytearray(text)
    return text


def strlcpy(dst: Buffer, src: Text, dstsize: int) -> int:
    """Copy ``src`` into ``dst`` using at most ``dstsize`` bytes, NUL included.

    Returns the length of ``src``; a result of ``dstsize`` or more means
    the copy was truncated.
    """
    data = _src_bytes(src)
    _check_size(dstsize, dst)
    if dstsize:
        count = min(len(data), dstsize - 1)
        dst[:count] = data[:count]
        dst[count] = 0
    return len(data)


def strlcat(dst: Optional[Buffer], src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst``, which holds ``size`` bytes.

    Returns the length of the string it tried to build: the initial length
    of ``dst`` (at most ``size``) plus the length of ``src``.
    """
    data = _src_bytes(src)
    if dst is None and size == 0:
        return len(data)
    if dst is None:
        raise TypeError("dst must not be None when size is positive")
    _check_size(size, dst)
    destlen = bytes(dst[:size]).find(0)
    if destlen < 0:
        destlen = size
    if size <= destlen:
        return size + len(data)
    count = min(len(data), size - 1 - destlen)
    dst[destlen:destlen + count] = data[:count]
    dst[destlen + count] = 0
    return destlen + len(data)


def strcpy(dst: Buffer, src: Text) -> Buffer:
    """Copy ``src`` and its terminator to the start of ``dst``; return ``dst``."""
    data = _src_bytes(src)
    needed = len(data) + 1
    if needed > len(dst):
        raise ValueError(f"buffer of size {len(dst)} cannot hold {needed} bytes")
    dst[:len(data)] = data
    dst[len(data)] = 0
    return dst


def strcat(dst: Buffer, src: Text) -> Buffer:
    """Append ``src`` to the NUL-terminated string in ``dst``; return ``dst``."""
    start = bytes(dst).find(0)
    if start < 0:
        raise ValueError("destination is not NUL-terminated")
    data = _src_bytes(src)
    end = start + len(data)
    if end + 1 > len(dst):
        raise ValueError(f"buffer of size {len(dst)} cannot hold {end + 1} bytes")
    dst[start:end] = data
    dst[end] = 0
    return dst