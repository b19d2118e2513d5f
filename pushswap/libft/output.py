"""Writing characters, strings and numbers to a text stream.

Every function writes to ``stream`` (standard output when None) and returns
the number of characters written.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: Optional[TextIO]) -> int:
    _target(stream).write(text)
    return len(text)


def _as_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def put_char(c: Any, stream: Optional[TextIO] = None) -> int:
    """Write one character."""
    return _emit(_as_char(c), stream)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s``; None writes nothing."""
    if s is None:
        return 0
    return _emit(s, stream)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return 0
    return _emit(s + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` in decimal."""
    return _emit(str(_as_int(n)), stream)


def _hex(value: int, fmt: str) -> str:
    if fmt not in ("x", "X"):
        raise ValueError(f"hex format must be 'x' or 'X', got {fmt!r}")
    if _as_int(value) < 0:
        raise ValueError(f"hex value must not be negative, got {value}")
    return format(value, fmt)


def put_hex(value: int, fmt: str, stream: Optional[TextIO] = None) -> int:
    """Write ``value`` in hexadecimal, lower case for 'x' and upper for 'X'."""
    return _emit(_hex(value, fmt), stream)


def put_pointer(value: Optional[int], stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` and lower-case hex, or ``(nil)`` for zero."""
    if value is None or value == 0:
        return _emit("(nil)", stream)
    return _emit("0x" + _hex(value, "x"), stream)


def _render(spec: str, args: list) -> Optional[str]:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return None
    if not args:
        raise TypeError(f"not enough arguments for conversion '%{spec}'")
    arg = args.pop(0)
    if spec == "c":
        return _as_char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in "di":
        return str(_to_int32(_as_int(arg)))
    if spec == "u":
        return str(_as_int(arg) & 0xFFFFFFFF)
    if spec in "xX":
        return _hex(_as_int(arg) & 0xFFFFFFFF, spec)
    if arg is None or arg == 0:
        return "(nil)"
    return "0x" + _hex(_as_int(arg) & 0xFFFFFFFFFFFFFFFF, "x")


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Formatted output supporting %c %s %d %i %u %x %X %p and %%.

    Integers are taken as 32-bit values the way C varargs would pass them.
    An unknown conversion writes nothing and is skipped together with its
    '%'. Returns the number of characters written.
    """
    pending = list(args)
    pieces = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            pieces.append(ch)
            pos += 1
            continue
        spec = fmt[pos + 1] if pos + 1 < len(fmt) else ""
        if spec:
            rendered = _render(spec, pending)
            if rendered is not None:
                pieces.append(rendered)
        pos += 2
    return _emit("".join(pieces), stream)