"""The ant farm: rooms, tunnels and the shortest route from start to end."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field


class FarmError(ValueError):
    """Raised when the farm is built or searched in an invalid way."""


@dataclass
class Room:
    """A room with its coordinates and the names of the rooms it connects to."""

    name: str
    x: int = 0
    y: int = 0
    links: list[str] = field(default_factory=list)


class Farm:
    """Rooms in the order they were added, joined by two-way tunnels."""

    def __init__(self) -> None:
        self._rooms: dict[str, Room] = {}
        self.start: str | None = None
        self.end: str | None = None

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms.values())

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, name: object) -> bool:
        return name in self._rooms

    @property
    def rooms(self) -> list[Room]:
        """The rooms in the order they were added."""
        return list(self._rooms.values())

    def add_room(self, room: Room) -> None:
        """Add a room.

        Rooms may not be added once the first room has tunnels, and a name
        must be non-empty, unique and must not begin with ``L``.
        """
        if self.has_tunnels():
            raise FarmError("rooms cannot be added after tunnels")
        if not room.name:
            raise FarmError("a room needs a name")
        if room.name.startswith("L"):
            raise FarmError(f"room name {room.name!r} must not begin with 'L'")
        if room.name in self._rooms:
            raise FarmError(f"duplicate room {room.name!r}")
        self._rooms[room.name] = room

    def has_room(self, name: str) -> bool:
        """True if a room of that name exists."""
        return name in self._rooms

    def room(self, name: str) -> Room:
        """The room of that name; KeyError if there is none."""
        return self._rooms[name]

    def connect(self, first: str, second: str) -> None:
        """Join two rooms by a tunnel in both directions."""
        for name in (first, second):
            if name not in self._rooms:
                raise FarmError(f"unknown room {name!r}")
        a = self._rooms[first]
        b = self._rooms[second]
        if second in a.links or first in b.links:
            raise FarmError(f"duplicate tunnel {first}-{second}")
        a.links.append(second)
        if first != second:
            b.links.append(first)

    def has_tunnels(self) -> bool:
        """True when the first room added has at least one tunnel."""
        first = next(iter(self._rooms.values()), None)
        return first is not None and bool(first.links)

    def shortest_path(self) -> list[str]:
        """Rooms an ant passes through from start to end, start excluded.

        Breadth-first search in tunnel order; raises FarmError when the
        start or end is missing, they are the same room, or the end cannot
        be reached.
        """
        if self.start is None or self.end is None:
            raise FarmError("start and end rooms are required")
        for name in (self.start, self.end):
            if name not in self._rooms:
                raise FarmError(f"unknown room {name!r}")
        if self.start == self.end:
            raise FarmError("start and end must be different rooms")

        previous: dict[str, str] = {}
        visited: set[str] = set()
        queue: deque[str] = deque([self.start])
        queued = {self.start}
        while queue:
            current = queue.popleft()
            queued.discard(current)
            if current == self.end:
                break
            visited.add(current)
            for neighbour in self._rooms[current].links:
                if neighbour not in visited and neighbour not in queued:
                    previous[neighbour] = current
                    queue.append(neighbour)
                    queued.add(neighbour)
        else:
            raise FarmError("no route from start to end")

        path = [self.end]
        step = previous[self.end]
        while step != self.start:
            path.append(step)
            step = previous[step]
        path.reverse()
        return path