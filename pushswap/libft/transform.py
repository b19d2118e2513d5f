"""String building helpers: splitting, trimming, slicing and joining.

Python strings are immutable, so operations that fill a destination buffer
return the resulting string with the length they report.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _require_str(s, "s")
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate ``s1`` and ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    The buffer keeps one place for the terminator, so at most ``size - 1``
    characters are held in total. Returns the resulting string and the
    length the full concatenation would have needed; when ``size`` is not
    larger than ``dst`` nothing is appended and ``size + len(src)`` is
    reported.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copy and the length of ``src``. A size of zero copies nothing.
    """
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` for each character.

    Where ``f`` returns a character it replaces the original; where it
    returns None the character is kept.
    """
    _require_str(s, "s")
    result = []
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character."""
    _require_str(s, "s")
    return "".join(f(index, ch) for index, ch in enumerate(s))