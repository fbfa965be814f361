# lemin

`lemin` solves the ant farm puzzle. It reads a description of a farm (a
number of ants, a set of rooms and the tunnels between them), finds the
shortest route from the start room to the end room, and prints every turn
of the ants' walk along it.

## Installing

```
pip install .
```

## Using the command

The farm is read from standard input:

```
lem-in < farm.txt
```

The same entry point can be started with `python -m lemin.cli < farm.txt`.
The command takes no options besides `--help`.

A farm description looks like this:

```
3
##start
start 0 0
a 1 0
b 2 0
##end
end 3 0
start-a
a-b
b-end
```

- The first line is the number of ants, a whole number from 1 to 32767.
  Comment lines before it are skipped.
- A room is `name x y`, with non-negative whole-number coordinates. Room
  names must not start with `L` and must be unique.
- `##start` and `##end` mark the room on the next line as the start or the
  end room. Other `##` lines are ignored.
- A tunnel is `first-second`, naming two rooms already given. Tunnels come
  after all the rooms, and the same tunnel may not be given twice.
- Lines starting with a single `#` are comments and are ignored.
- Reading stops at the first empty line.

The accepted lines are echoed back, followed by a blank line and one line
per turn. Each move is written `L<ant>-<room>` followed by a space. For the
farm above the moves are:

```
L1-a
L1-b L2-a
L1-end L2-b L3-a
L2-end L3-b
L3-end
```

Ant 1 sets off on the first turn, ant 2 on the second and so on, so all
ants have arrived after (rooms on the route + ants − 1) turns.

If the farm is invalid or incomplete (no ant count, no start or end, no
tunnels), or the end cannot be reached from the start, the lines read so
far are echoed and `ERROR` is printed. Once the farm is complete, a later
bad line ends the reading instead, and the farm read up to that point is
solved.

## Using it from Python

```python
from lemin.cli import run

print(run("2\n##start\ns 0 0\n##end\ne 1 0\ns-e\n"), end="")
```

`run(text)` returns the whole output as a string. The pieces are also
usable on their own:

- `lemin.parser.parse(lines)` turns the lines of a farm description into a
  `ParseResult` holding `ants`, `farm` and `echo` (the accepted lines).
  `lemin.parser.read_lines(stream)` yields the lines of a text stream
  without their newlines, and `lemin.parser.is_number(text)` checks that a
  text is all digits.
- `lemin.farm.Farm` holds `Room` objects (`name`, `x`, `y`, `links`) and
  their tunnels, with `add_room`, `has_room`, `room`, `connect`,
  `has_tunnels` and `shortest_path()`, the breadth-first route from
  `start` to `end` (start excluded). Invalid rooms, tunnels or routes raise
  `FarmError`, a `ValueError`.
- `lemin.simulate.simulate(path, ant_total)` returns the moves of each
  turn as `(ant, room)` pairs, and `lemin.simulate.format_moves(path,
  ant_total)` renders them as text.

Small helper modules come with it: `lemin.chars` (character tests, case
mapping, `atoi`, `itoa`), `lemin.strings` (C-style string searching,
comparing and splitting on Python strings), `lemin.memory` (byte-buffer
operations on `bytearray`) and `lemin.output` (writing characters, text,
lines and numbers to standard output or a given stream).

## What it does not do

All ants follow the one shortest route, one after another. The package
does not look for several disjoint routes to move ants in parallel, and
it does not draw or animate the farm.

## Running the tests

```
pip install .[test]
pytest
```