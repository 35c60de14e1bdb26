"""Puzzle platforms: the quickest climb across terraced stone.

Each platform has a level from 0 to 9. The levels wrap around, so moving
between two platforms costs the shorter way round between their levels,
plus one.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Sequence
from dataclasses import dataclass, field

from questbook.helpers import Point

WALLS = frozenset("# ")
START = "S"
END = "E"


def get_diff(left: int, right: int) -> int:
    """Cost of stepping between levels ``left`` and ``right``, wrapping at ten."""
    diff = abs(left - right)
    if diff > 5:
        diff = 5 - (diff - 5)
    return diff + 1


@dataclass(eq=False)
class Platform:
    """A walkable cell, linked to the platforms it can step onto."""

    position: Point
    level: int
    up: Platform | None = field(default=None, repr=False)
    down: Platform | None = field(default=None, repr=False)
    left: Platform | None = field(default=None, repr=False)
    right: Platform | None = field(default=None, repr=False)

    def neighbors(self) -> list[tuple[Platform, int]]:
        """Linked platforms with the cost of stepping to each: up, right, down, left."""
        return [
            (other, self.diff(other))
            for other in (self.up, self.right, self.down, self.left)
            if other is not None
        ]

    def diff(self, other: Platform | None) -> int:
        """Cost of stepping to ``other``, or -1 when there is no platform."""
        if other is None:
            return -1
        return get_diff(self.level, other.level)


def parse_platforms(
    lines: Sequence[str], trim_border: bool = False
) -> tuple[list[Platform], list[Platform], Platform | None]:
    """Read the map and link neighbouring platforms.

    Returns the platforms, the start platforms in reading order, and the
    end platform (the last ``E``, or ``None``). ``S`` and ``E`` stand at
    level 0. With ``trim_border`` no platform links onto one that lies on
    the map's outer edge.
    """
    platforms: list[Platform] = []
    starts: list[Platform] = []
    end: Platform | None = None
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char in WALLS:
                continue
            level = 0 if char in (START, END) else ord(char) - ord("0")
            platform = Platform(Point(x, y), level)
            platforms.append(platform)
            if char == START:
                starts.append(platform)
            elif char == END:
                end = platform

    height = len(lines)
    width = len(lines[0]) if lines else 0

    def on_border(platform: Platform) -> bool:
        x, y = platform.position.x, platform.position.y
        return x == 0 or x == width - 1 or y == 0 or y == height - 1

    by_position = {platform.position: platform for platform in platforms}

    def linked(x: int, y: int) -> Platform | None:
        other = by_position.get(Point(x, y))
        if other is None or (trim_border and on_border(other)):
            return None
        return other

    for platform in platforms:
        x, y = platform.position.x, platform.position.y
        platform.up = linked(x, y - 1)
        platform.down = linked(x, y + 1)
        platform.left = linked(x - 1, y)
        platform.right = linked(x + 1, y)
    return platforms, starts, end


def shortest_path(
    platforms: Sequence[Platform],
    start: Platform,
    end: Platform,
    limit: int | None = None,
) -> int | None:
    """Cost of the cheapest route from ``start`` to ``end``.

    Returns ``None`` when ``end`` cannot be reached, or when ``limit`` is
    given and the route would cost at least that much.
    """
    if start not in platforms or end not in platforms:
        raise ValueError("start and end must be among the platforms")
    order = itertools.count(1)
    dist: dict[Platform, int] = {start: 0}
    queue: list[tuple[int, int, Platform]] = [(0, 0, start)]
    visited: set[int] = set()
    while queue:
        distance, _, platform = heapq.heappop(queue)
        if limit is not None and distance >= limit:
            return None
        if id(platform) in visited:
            continue
        visited.add(id(platform))
        if platform is end:
            return distance
        for neighbour, cost in platform.neighbors():
            alt = distance + cost
            if neighbour not in dist or alt < dist[neighbour]:
                dist[neighbour] = alt
                heapq.heappush(queue, (alt, next(order), neighbour))
    return None


def _single_route(lines: Sequence[str]) -> int:
    platforms, starts, end = parse_platforms(lines, False)
    if not starts:
        raise ValueError("the map has no start")
    if end is None:
        raise ValueError("the map has no end")
    distance = shortest_path(platforms, starts[-1], end)
    if distance is None:
        raise ValueError("the end cannot be reached")
    return distance


def part1(lines: Sequence[str]) -> int:
    """Cheapest route from the start to the end."""
    return _single_route(lines)


def part2(lines: Sequence[str]) -> int:
    """Cheapest route from the start to the end on the larger map."""
    return _single_route(lines)


def part3(lines: Sequence[str]) -> int:
    """Cheapest route to the end from any of the starts, keeping off the border."""
    platforms, starts, end = parse_platforms(lines, True)
    if not starts:
        raise ValueError("the map has no start")
    if end is None:
        raise ValueError("the map has no end")
    shortest: int | None = None
    for start in starts:
        distance = shortest_path(platforms, start, end, shortest)
        if distance is not None:
            shortest = distance
    if shortest is None:
        raise ValueError("the end cannot be reached")
    return shortest