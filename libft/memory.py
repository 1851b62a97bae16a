"""Byte-buffer operations on bytes-like objects.

Destination buffers must be writable (``bytearray`` or a writable
``memoryview``). Lengths that reach past a buffer raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
ByteValue = Union[int, str]

SIZE_MAX = 2**64 - 1


def _byte(value: ByteValue) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        value = ord(value)
    return value & 0xFF


def _check_length(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of size {len(buffer)}")


def memset(buffer: bytearray, value: ByteValue, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` and return it."""
    _check_length(length, buffer)
    buffer[:length] = bytes([_byte(value)]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    if dst is src:
        return dst
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to ``dst``; the regions may overlap."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data: BytesLike, value: ByteValue, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(_byte(value))
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size > 0 and count > SIZE_MAX // size:
        raise OverflowError("count * size exceeds the addressable size")
    return bytearray(count * size)