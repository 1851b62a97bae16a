"""Conversions between numbers and text, and string building helpers.

Functions here take ``str`` or bytes-like values and treat the first NUL
as the end of the string. Where a required input is ``None`` they return
``None``, as the C-style helpers they mirror return no string.
"""

from __future__ import annotations

from itertools import count, takewhile
from typing import Callable, List, MutableSequence, Optional, Union

from libft.strings import strdup, strlen

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_ULLONG_MOD = 2**64
_INT_MOD = 2**32
_INT_HALF = 2**31


def _as_text(s: Text) -> Union[str, bytes]:
    text = strdup(s)
    return bytes(text) if isinstance(text, bytearray) else text


def _to_int32(value: int) -> int:
    return (value + _INT_HALF) % _INT_MOD - _INT_HALF


def atoi(text: Text) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. The result wraps to a 32-bit signed integer.
    """
    data = _as_text(text)
    chars = data.decode("latin-1") if isinstance(data, bytes) else data
    body = chars.lstrip("".join(_WHITESPACE))
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    value = 0
    for digit in takewhile(lambda ch: ch in _DIGITS, body):
        value = (value * 10 + int(digit)) % _ULLONG_MOD
    return _to_int32(_to_int32(value) * sign)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(int(n))


def _separator(c: CharLike, kind: type) -> Union[str, bytes]:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
    else:
        code = c & 0xFF
    return chr(code) if kind is str else bytes([code])


def split(s: Optional[Text], c: CharLike) -> Optional[List[Union[str, bytes]]]:
    """Split ``s`` on the character ``c``, dropping empty pieces."""
    if s is None:
        return None
    text = _as_text(s)
    sep = _separator(c, type(text))
    return [word for word in text.split(sep) if word]


def substr(s: Optional[Text], start: int, length: int) -> Optional[Union[str, bytes]]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    text = _as_text(s)
    if len(text) < start:
        return text[:0]
    return text[start:start + length]


def strjoin(s1: Optional[Text], s2: Optional[Text]) -> Optional[Union[str, bytes]]:
    """Concatenate two strings; a missing one is treated as absent."""
    if s1 is None and s2 is None:
        return None
    if s2 is None:
        return _as_text(s1)
    if s1 is None:
        return _as_text(s2)
    return _as_text(s1) + _as_text(s2)


def fstrjoin(s1: Optional[Text], s2: Optional[Text]) -> Optional[Union[str, bytes]]:
    """Concatenate two strings; return None if either is missing."""
    if s1 is None or s2 is None:
        return None
    return _as_text(s1) + _as_text(s2)


def strtrim(s1: Optional[Text], charset: Optional[Text]) -> Optional[Union[str, bytes]]:
    """Remove every character of ``charset`` from both ends of ``s1``."""
    if s1 is None or charset is None:
        return None
    return _as_text(s1).strip(_as_text(charset))


def strmapi(
    s: Optional[Text], f: Optional[Callable[[int, CharLike], CharLike]]
) -> Optional[Union[str, bytes]]:
    """Build a new string from ``f(index, char)`` applied to each character.

    For byte strings ``f`` receives and returns integer byte values.
    """
    if s is None or f is None:
        return None
    text = _as_text(s)
    if isinstance(text, str):
        return "".join(f(index, ch) for index, ch in enumerate(text))
    return bytes(f(index, byte) & 0xFF for index, byte in enumerate(text))


def striteri(
    s: Optional[MutableSequence], f: Optional[Callable[[int, CharLike], Optional[CharLike]]]
) -> None:
    """Call ``f(index, char)`` on each character of ``s`` in place.

    ``s`` is a ``bytearray`` or a list of one-character strings. A value
    returned by ``f`` replaces the character; ``None`` leaves it as it is.
    The walk stops at the end of ``s`` or at the first NUL, re-checked
    after every call.
    """
    if s is None or f is None:
        return
    for index in count():
        if index >= len(s) or s[index] in (0, "\0"):
            break
        replacement = f(index, s[index])
        if replacement is not None:
            s[index] = replacement