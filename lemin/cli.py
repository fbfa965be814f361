"""Command line entry: read a farm on standard input and print the moves."""

from __future__ import annotations

import argparse
import io
import sys

from .farm import FarmError
from .output import putstr_to
from .parser import _ParseFailure, parse, read_lines
from .simulate import format_moves

_ERROR = "ERROR\n"


def _echo(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def run(text: str) -> str:
    """Return the full output for a farm description given as text."""
    try:
        result = parse(read_lines(io.StringIO(text)))
    except _ParseFailure as failure:
        return _echo(failure.echo) + _ERROR
    echoed = _echo(result.echo)
    try:
        path = result.farm.shortest_path()
    except FarmError:
        return echoed + _ERROR
    return echoed + format_moves(path, result.ants)


def main(argv: list[str] | None = None) -> int:
    """Read standard input, write the description and the moves."""
    parser = argparse.ArgumentParser(
        prog="lem-in",
        description="Move ants from the start room to the end room of a farm.",
    )
    parser.parse_args(argv)
    putstr_to(run(sys.stdin.read()), sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())