"""Herb gathering: the shortest walk through a walled garden to collect herbs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

WALL = "#"
WATER = "~"
OPEN = "."
HERB = "H"

Garden = list[list["GardenPoint"]]


@dataclass(eq=False)
class GardenPoint:
    """One tile of the garden, remembering how a search reached it."""

    x: int
    y: int
    impasse: bool = True
    herb: bool = False
    tile_char: str = WALL
    parent: GardenPoint | None = field(default=None, repr=False)


def is_herb(tile: str) -> bool:
    """True for any tile that is neither open ground, wall nor water."""
    return tile not in (OPEN, WALL, WATER)


def parse_garden(lines: Sequence[str], any_herb: bool = False) -> Garden:
    """Read the garden map.

    Without ``any_herb`` only walls block and only ``H`` is a herb; with it,
    water blocks as well and every other letter is a herb.
    """
    if not lines:
        raise ValueError("the garden is empty")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("garden rows must all have the same length")
    garden: Garden = []
    for y, line in enumerate(lines):
        row = []
        for x, tile in enumerate(line):
            if any_herb:
                impasse = tile in (WALL, WATER)
                herb = is_herb(tile)
            else:
                impasse = tile == WALL
                herb = tile == HERB
            row.append(GardenPoint(x, y, impasse, herb, tile))
        garden.append(row)
    return garden


def get_edges(garden: Garden, point: GardenPoint) -> list[GardenPoint]:
    """Passable tiles next to ``point``: above, below, left, right."""
    height = len(garden)
    width = len(garden[0]) if garden else 0
    candidates = (
        (point.x, point.y - 1),
        (point.x, point.y + 1),
        (point.x - 1, point.y),
        (point.x + 1, point.y),
    )
    return [
        garden[y][x]
        for x, y in candidates
        if 0 <= x < width and 0 <= y < height and not garden[y][x].impasse
    ]


def bfs(garden: Garden, start: GardenPoint, goal: GardenPoint | None = None) -> GardenPoint:
    """Breadth-first search from ``start`` to ``goal``, or to the nearest herb.

    Every tile reached records its ``parent``; the tile found is returned.
    """
    for row in garden:
        for point in row:
            point.parent = None
    visited = {start}
    queue = deque([start])
    while queue:
        point = queue.popleft()
        if goal is None and point.herb:
            return point
        if goal is not None and (point.x, point.y) == (goal.x, goal.y):
            return point
        for edge in get_edges(garden, point):
            if edge in visited:
                continue
            visited.add(edge)
            edge.parent = point
            queue.append(edge)
    raise ValueError("no herb can be reached" if goal is None else "the goal cannot be reached")


def path_length(goal: GardenPoint, start: GardenPoint) -> int:
    """Steps from ``start`` to ``goal`` along the parents the last search left."""
    steps = 0
    current = goal
    while current is not start:
        if current.parent is None:
            raise ValueError("the goal was not reached from this start")
        current = current.parent
        steps += 1
    return steps


def _entrance(garden: Garden) -> GardenPoint:
    for point in garden[0]:
        if not point.impasse:
            return point
    raise ValueError("the garden has no entrance on its top row")


def part1(lines: Sequence[str]) -> int:
    """Steps to the nearest herb and back to the entrance."""
    garden = parse_garden(lines, False)
    start = _entrance(garden)
    return 2 * path_length(bfs(garden, start), start)


def part2(lines: Sequence[str]) -> int:
    """Steps to gather one herb of every kind, always the nearest next, and return."""
    garden = parse_garden(lines, True)
    herbs = {point.tile_char for row in garden for point in row if point.herb}
    entrance = start = _entrance(garden)
    total = 0
    while herbs:
        goal = bfs(garden, start)
        herbs.discard(goal.tile_char)
        total += path_length(goal, start)
        start = goal
        for row in garden:
            for point in row:
                if point.tile_char == goal.tile_char:
                    point.herb = False
    total += path_length(bfs(garden, start, entrance), start)
    return total


def part3(lines: Sequence[str]) -> int:
    """Read the third garden; its route is left unsolved, so the answer is 0."""
    garden = parse_garden(lines, True)
    return 0 if garden else 0