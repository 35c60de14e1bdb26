"""Growing trees: trace branches through space and find the best trunk tap."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from questbook import helpers
from questbook.helpers import Point3

ORIGIN = Point3(0, 0, 0)


class Direction(Enum):
    """Which way a growth step goes."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"
    BACKWARD = "B"


_STEPS = {
    Direction.UP: (0, 1, 0),
    Direction.DOWN: (0, -1, 0),
    Direction.LEFT: (-1, 0, 0),
    Direction.RIGHT: (1, 0, 0),
    Direction.FORWARD: (0, 0, 1),
    Direction.BACKWARD: (0, 0, -1),
}

_AROUND = ((0, 0, 1), (0, 0, -1), (0, 1, 0), (0, -1, 0), (1, 0, 0), (-1, 0, 0))


@dataclass(frozen=True)
class GrowthPlan:
    """Grow ``distance`` segments in ``direction``."""

    direction: Direction
    distance: int


def parse_plan(text: str) -> GrowthPlan:
    """Read a step such as ``U5``."""
    if not text:
        raise ValueError("empty growth step")
    try:
        direction = Direction(text[0])
    except ValueError:
        raise ValueError(f"unknown direction in {text!r}") from None
    return GrowthPlan(direction, int(text[1:]))


def _move(point: Point3, step: tuple[int, int, int]) -> Point3:
    dx, dy, dz = step
    return Point3(point.x + dx, point.y + dy, point.z + dz)


def trace(line: str) -> list[Point3]:
    """Every segment grown by a comma-separated line of steps, in order, from the origin."""
    current = ORIGIN
    path: list[Point3] = []
    for text in helpers.split(line, ","):
        plan = parse_plan(text)
        step = _STEPS[plan.direction]
        for _ in range(plan.distance):
            current = _move(current, step)
            path.append(current)
    return path


def neighbors(point: Point3, points: Iterable[Point3] | set[Point3]) -> list[Point3]:
    """The six face neighbours of ``point`` that are among ``points``."""
    present = points if isinstance(points, (set, frozenset)) else set(points)
    return [candidate for candidate in (_move(point, step) for step in _AROUND) if candidate in present]


def part1(lines: Sequence[str]) -> int:
    """Greatest height reached by the first plan, following only up and down steps."""
    if not lines:
        raise ValueError("no plan")
    current = 0
    highest = 0
    for text in helpers.split(lines[0], ","):
        if text[0] not in (Direction.UP.value, Direction.DOWN.value):
            continue
        plan = parse_plan(text)
        current += plan.distance if plan.direction is Direction.UP else -plan.distance
        highest = max(highest, current)
    return highest


def part2(lines: Iterable[str]) -> int:
    """Number of distinct segments grown by all plans."""
    return len({point for line in lines for point in trace(line)})


def _distances(source: Point3, points: set[Point3]) -> dict[Point3, int]:
    dist = {source: 0}
    queue = deque([source])
    while queue:
        point = queue.popleft()
        for neighbour in neighbors(point, points):
            if neighbour not in dist:
                dist[neighbour] = dist[point] + 1
                queue.append(neighbour)
    return dist


def part3(lines: Iterable[str]) -> int:
    """Least total distance from every leaf to a single trunk segment."""
    points: set[Point3] = set()
    leaves: set[Point3] = set()
    for line in lines:
        path = trace(line)
        points.update(path)
        leaves.add(path[-1] if path else ORIGIN)

    trunk = sorted(point for point in points if point.x == 0 and point.z == 0)
    if not trunk:
        raise ValueError("the tree has no trunk")

    from_leaves = [_distances(leaf, points) for leaf in leaves]
    totals = [
        sum(dist[segment] for dist in from_leaves)
        for segment in trunk
        if all(segment in dist for dist in from_leaves)
    ]
    if not totals:
        raise ValueError("no trunk segment is reached by every leaf")
    return min(totals)