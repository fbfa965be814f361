"""String comparison, searching, splitting and building helpers.

Positions are returned as indices into the text, or None where nothing is
found. Where these helpers accept None in place of a string, None stands
for a missing string and gets the answer documented on each helper.
"""

from __future__ import annotations

from collections.abc import Callable

_TRIM_CHARS = " \n\t"
_TERMINATOR = "\0"


def _char(c: str | int) -> str:
    """Return a one-character string from a character or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c)


def _compare(first: str, second: str, limit: int | None = None) -> int:
    """Difference of the first differing character codes, with end of text as 0."""
    if limit is not None:
        first = first[:limit]
        second = second[:limit]
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
    if len(first) == len(second):
        return 0
    if len(first) < len(second):
        return -ord(second[len(first)])
    return ord(first[len(second)])


def strcmp(first: str | None, second: str | None) -> int:
    """Compare two texts: negative, zero or positive like strcmp.

    If either text is None the result is 1.
    """
    if first is None or second is None:
        return 1
    return _compare(first, second)


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters of two texts."""
    if length < 0:
        raise ValueError("length must not be negative")
    return _compare(first, second, length)


def strequ(first: str | None, second: str | None) -> bool:
    """True when both texts are given and equal."""
    if first is None or second is None:
        return False
    return first == second


def strnequ(first: str | None, second: str | None, n: int) -> bool:
    """True when both texts are given and their first ``n`` characters match."""
    if first is None or second is None:
        return False
    return strncmp(first, second, n) == 0


def strchr(text: str, c: str | int) -> int | None:
    """Index of the first occurrence of ``c``; the terminator matches at the end."""
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Index of the last occurrence of ``c``; the terminator matches at the end."""
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strstr(text: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle``; an empty needle is found at 0."""
    index = text.find(needle)
    return None if index < 0 else index


def strnstr(text: str, needle: str, n: int) -> int | None:
    """Find ``needle`` wholly within the first ``n`` characters of ``text``."""
    if not needle:
        return 0
    width = len(needle)
    return next(
        (
            start
            for start in range(len(text))
            if n - start >= width and text.startswith(needle, start)
        ),
        None,
    )


def strpbrk(text: str | None, accept: str | None) -> int | None:
    """Index of the first character of ``text`` that appears in ``accept``."""
    if text is None or accept is None:
        return None
    return next((i for i, ch in enumerate(text) if ch in accept), None)


def strspn(text: str | None, accept: str | None) -> int:
    """Count pairs of equal characters between ``text`` and ``accept``.

    Every character of ``text`` adds the number of times it occurs in
    ``accept``; this is a total over the whole text, not a prefix length.
    """
    if text is None or accept is None:
        return 0
    return sum(accept.count(ch) for ch in text)


def strcspn(text: str | None, reject: str | None) -> int:
    """Length of the leading part of ``text`` holding no character of ``reject``."""
    if text is None or reject is None:
        return 0
    return next((i for i, ch in enumerate(text) if ch in reject), len(text))


def strsplit(text: str | None, separator: str | int) -> list[str] | None:
    """Split on a separator character, dropping empty pieces."""
    if text is None:
        return None
    sep = _char(separator)
    return [piece for piece in text.split(sep) if piece]


def strsub(text: str | None, start: int, length: int) -> str | None:
    """Return ``length`` characters of ``text`` beginning at ``start``."""
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(text):
        raise ValueError(
            f"substring {start}:{start + length} runs past the end of a text of length {len(text)}"
        )
    return text[start : start + length]


def strtrim(text: str | None) -> str | None:
    """Remove leading and trailing spaces, newlines and tabs."""
    if text is None:
        return None
    return text.strip(_TRIM_CHARS)


def strmap(text: str | None, func: Callable[[str], str] | None) -> str | None:
    """Apply ``func`` to every character and join the results."""
    if text is None or func is None:
        return None
    return "".join(func(ch) for ch in text)


def strmapi(text: str | None, func: Callable[[int, str], str] | None) -> str | None:
    """Apply ``func`` to every index and character and join the results."""
    if text is None or func is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(text))


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two texts; None if either is missing."""
    if first is None or second is None:
        return None
    return first + second


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` as if into a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had, as strlcat does. At most ``size - 1`` characters end up in the
    result, and if ``dest`` already fills the buffer it is left unchanged.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = min(len(dest), size)
    room = size - used
    if room == 0:
        return dest, used + len(src)
    return dest + src[: room - 1], used + len(src)