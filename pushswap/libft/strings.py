"""Text helpers: integer conversion, searching and comparison.

Positions are returned as integer offsets into the string, or None where
nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]

_SPACES = frozenset(" \t\n\v\f\r")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    A single '+' or '-' is accepted before the digits; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    rest = text[pos:]
    if rest.startswith("+") and not rest.startswith("+-"):
        rest = rest[1:]
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the first ``c`` in ``s``; the NUL character matches at the end."""
    ch = _char(c)
    offset = s.find(ch)
    if offset >= 0:
        return offset
    if ch == "\0":
        return len(s)
    return None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the last ``c`` in ``s``; the NUL character matches at the end."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    offset = s.rfind(ch)
    return None if offset < 0 else offset


def _diff(s1: str, s2: str, limit: Optional[int]) -> int:
    a = s1 if limit is None else s1[:limit]
    b = s2 if limit is None else s2[:limit]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return ord(a[len(b)])
    return -ord(b[len(a)])


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing characters, an end counting as 0."""
    return _diff(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n == 0:
        return 0
    return _diff(s1, s2, n)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Offset of ``little`` lying wholly within the first ``length`` chars of ``big``."""
    if not little:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    offset = big[:length].find(little)
    return None if offset < 0 else offset


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)