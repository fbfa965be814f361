"""Writing characters, text, lines and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _char(c: str | int) -> str:
    """Return a one-character string from a character or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c)


def putchar_to(c: str | int, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_char(c))


def putchar(c: str | int) -> None:
    """Write one character to standard output."""
    putchar_to(c, sys.stdout)


def putstr_to(text: str | None, stream: TextIO) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    stream.write(text)


def putstr(text: str | None) -> None:
    """Write ``text`` to standard output; None writes nothing."""
    putstr_to(text, sys.stdout)


def putendl_to(text: str | None, stream: TextIO) -> None:
    """Write ``text`` and a newline to ``stream``; None writes nothing."""
    if text is None:
        return
    stream.write(text + "\n")


def putendl(text: str | None) -> None:
    """Write ``text`` and a newline to standard output; None writes nothing."""
    putendl_to(text, sys.stdout)


def putnbr_to(number: int, stream: TextIO) -> None:
    """Write the decimal form of ``number`` to ``stream``."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    stream.write(str(number))


def putnbr(number: int) -> None:
    """Write the decimal form of ``number`` to standard output."""
    putnbr_to(number, sys.stdout)