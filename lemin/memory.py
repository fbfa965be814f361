"""Byte-buffer operations on bytearrays and other bytes-like objects."""

from __future__ import annotations


def _check_span(name: str, data: bytes | bytearray | memoryview, n: int) -> None:
    """Raise if ``n`` is negative or runs past the end of ``data``."""
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(data):
        raise ValueError(
            f"{name} holds {len(data)} bytes, fewer than the {n} requested"
        )


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_span("buffer", buffer, n)
    buffer[:n] = bytes(n)


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value``."""
    _check_span("buffer", buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_span("source", src, n)
    _check_span("destination", dest, n)
    dest[:n] = src[:n]
    return dest


def memccpy(
    dest: bytearray, src: bytes | bytearray, stop: int, n: int
) -> int | None:
    """Copy bytes from ``src`` to ``dest``, stopping after ``stop`` is copied.

    Returns the index in ``dest`` just past the copied ``stop`` byte, or
    None when ``stop`` is not among the first ``n`` bytes of ``src``.
    """
    _check_span("source", src, n)
    _check_span("destination", dest, n)
    target = stop & 0xFF
    found = src.find(bytes([target]), 0, n)
    count = n if found < 0 else found + 1
    dest[:count] = src[:count]
    return None if found < 0 else count


def memmove(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to ``dest``; safe when the two overlap."""
    _check_span("source", src, n)
    _check_span("destination", dest, n)
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` in the first ``n`` bytes."""
    _check_span("data", data, n)
    index = data.find(bytes([value & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes: the difference of the first unequal pair, else 0."""
    _check_span("first", first, n)
    _check_span("second", second, n)
    return next((a - b for a, b in zip(first[:n], second[:n]) if a != b), 0)