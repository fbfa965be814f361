"""Reading a farm description: ant count, rooms, commands and tunnels.

Every line that is accepted is kept in ``echo`` in the order it was read,
so that the description can be written back before the moves. A problem
is fatal only while the farm is still incomplete; once the ant count, the
start, the end and the tunnels are known, a bad line either stops reading
or is passed over.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from .chars import atoi, is_digit
from .farm import Farm, FarmError, Room
from .strings import strsplit

MAX_ANTS = 32767


class _ParseFailure(FarmError):
    """A fatal input error, carrying the lines echoed before it."""

    def __init__(self, message: str, echo: list[str]) -> None:
        super().__init__(message)
        self.echo = echo


@dataclass
class ParseResult:
    """The number of ants, the farm, and the lines to echo."""

    ants: int
    farm: Farm
    echo: list[str] = field(default_factory=list)


def is_number(text: str) -> bool:
    """True when every character is an ASCII digit; the empty text counts."""
    return all(is_digit(c) for c in text)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` without their newlines."""
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


class _Parser:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.farm = Farm()
        self.ants = 0
        self.echo: list[str] = []

    def _fail(self, message: str) -> None:
        raise _ParseFailure(message, list(self.echo))

    def _complete(self) -> bool:
        farm = self.farm
        return (
            self.ants > 0
            and farm.start is not None
            and farm.end is not None
            and farm.has_tunnels()
        )

    def _check(self, message: str) -> None:
        """Fail unless the farm is already complete."""
        if not self._complete():
            self._fail(message)

    def _result(self) -> ParseResult:
        return ParseResult(self.ants, self.farm, self.echo)

    def run(self) -> ParseResult:
        self._read_ants()
        for line in self._lines:
            if not line:
                break
            self.echo.append(line)
            if line.startswith("#") and not line.startswith("##"):
                continue
            if not self._read_line(line):
                return self._result()
        self._check("the farm needs a start, an end, rooms and tunnels")
        return self._result()

    def _read_ants(self) -> None:
        for line in self._lines:
            if line.startswith("#"):
                continue
            if not is_number(line):
                self._fail(f"invalid number of ants {line!r}")
            self.echo.append(line)
            count = atoi(line)
            if not 0 < count <= MAX_ANTS:
                self._fail(f"number of ants must be between 1 and {MAX_ANTS}")
            self.ants = count
            return
        self._fail("missing number of ants")

    def _read_line(self, line: str) -> bool:
        if line.startswith("##"):
            command = line[2:]
            if command == "start":
                self._start_end(start=True, end=False)
            elif command == "end":
                self._start_end(start=False, end=True)
            return True
        if "-" not in line:
            return self._room(line, start=False, end=False)
        return self._link(line)

    def _start_end(self, start: bool, end: bool) -> None:
        while True:
            line = next(self._lines, None)
            if line is None:
                self._check("missing room after command")
                return
            if (
                not line
                or (start and self.farm.start is not None)
                or (end and self.farm.end is not None)
            ):
                self._check("misplaced start or end command")
            self.echo.append(line)
            if not line.startswith("#"):
                self._room(line, start, end)
                return

    def _room(self, line: str, start: bool, end: bool) -> bool:
        parts = strsplit(line, " ") or []
        farm = self.farm
        if (
            farm.has_tunnels()
            or len(parts) != 3
            or parts[0].startswith("L")
            or farm.has_room(parts[0])
        ):
            self._check(f"invalid room {line!r}")
            return False
        name, x_text, y_text = parts
        if start and farm.start is None:
            farm.start = name
        if end and farm.end is None:
            farm.end = name
        if not (is_number(x_text) and is_number(y_text)):
            return False
        x, y = atoi(x_text), atoi(y_text)
        if x < 0 or y < 0:
            return False
        farm.add_room(Room(name, x, y))
        return True

    def _link(self, line: str) -> bool:
        parts = strsplit(line, "-") or []
        if (
            len(parts) < 2
            or not self.farm.has_room(parts[0])
            or not self.farm.has_room(parts[1])
        ):
            self._check(f"invalid tunnel {line!r}")
            return False
        first, second = parts[0], parts[1]
        self._save_link(first, second)
        self._save_link(second, first)
        return True

    def _save_link(self, name: str, other: str) -> None:
        links = self.farm.room(name).links
        if other in links:
            self._check(f"duplicate tunnel {name}-{other}")
            return
        links.append(other)


def parse(lines: Iterable[str]) -> ParseResult:
    """Read a farm description from ``lines``.

    Raises FarmError when the input is invalid while the farm is still
    incomplete; the error's ``echo`` holds the lines accepted so far.
    """
    return _Parser(lines).run()