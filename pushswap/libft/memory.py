"""Byte-buffer helpers working on bytearray objects."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf: bytes, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n, buf)
    offset = bytes(buf[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise TypeError("both buffers are required")
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled as if the source were copied first.
    """
    if length < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dest, src) + length > len(buf):
        raise IndexError("region extends past the end of the buffer")
    buf[dest:dest + length] = buf[src:src + length]
    return buf