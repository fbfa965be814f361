"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_ATOI_WHITESPACE = frozenset("\t\v\n\r\f ")
_SPACE_CODES = frozenset(map(ord, "\t\n\f\v\r "))


def _code(c: str | int) -> int:
    """Return the code of a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for tab, newline, form feed, vertical tab, carriage return or space."""
    return _code(c) in _SPACE_CODES


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def _wrap_int(value: int) -> int:
    """Reduce a value to a signed 32-bit integer, wrapping on overflow."""
    value &= (1 << _INT_BITS) - 1
    if value > _INT_MAX:
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is taken, then digits
    are read until the first non-digit. Text with no digits gives 0. The
    result wraps to a signed 32-bit integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _ATOI_WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        sign = -1 if text[position] == "-" else 1
        position += 1
    start = position
    while position < length and is_digit(text[position]):
        position += 1
    digits = text[start:position]
    value = int(digits) if digits else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)