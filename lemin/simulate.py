"""Marching ants along a single route, one new ant setting off each turn."""

from __future__ import annotations

from collections.abc import Sequence

Move = tuple[int, str]


def simulate(path: Sequence[str], ant_total: int) -> list[list[Move]]:
    """Return the moves of every turn as ``(ant number, room)`` pairs.

    ``path`` lists the rooms an ant passes through after leaving the start,
    ending with the end room. Ant 1 leaves on the first turn and ant ``k``
    on turn ``k``; within a turn the moves are ordered by ant number. All
    ants have arrived after ``len(path) + ant_total - 1`` turns.
    """
    rooms = list(path)
    if not rooms:
        raise ValueError("the path must hold at least one room")
    if ant_total <= 0:
        raise ValueError("at least one ant is needed")
    length = len(rooms)
    turns = length + ant_total - 1
    return [
        [
            (ant, rooms[turn - ant])
            for ant in range(max(1, turn - length + 1), min(turn, ant_total) + 1)
        ]
        for turn in range(1, turns + 1)
    ]


def format_moves(path: Sequence[str], ant_total: int) -> str:
    """Render the moves: a blank line, then one line per turn.

    Each move is written as ``L<ant>-<room>`` followed by a space.
    """
    lines = (
        "".join(f"L{ant}-{room} " for ant, room in turn) + "\n"
        for turn in simulate(path, ant_total)
    )
    return "\n" + "".join(lines)