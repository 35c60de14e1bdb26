"""Catapult targeting: the cheapest shot that hits each target."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from questbook import helpers
from questbook.helpers import Point

PART3_CATAPULTS = (3, 2, 1)
_BACKGROUND = frozenset(".=")


def get_power(distance: int) -> int:
    """Power that covers ``distance``, or -1 when it is not a multiple of three."""
    if distance % 3 == 0:
        return distance // 3
    return -1


def can_hit(height: int, target: Point) -> int:
    """Power a catapult at ``height`` needs to hit ``target``, or -1 if it cannot."""
    return get_power(target.x - (height - target.y))


def point_in_time(meteor: Point, time: int) -> Point:
    """Where a meteor falling diagonally towards the origin is after ``time`` steps."""
    return Point(meteor.x - time, meteor.y - time)


def _parse(lines: Sequence[str], target_chars: str) -> tuple[list[int], list[tuple[Point, str]]]:
    catapults: list[int] = []
    targets: list[tuple[Point, str]] = []
    for row, line in enumerate(lines):
        y = len(lines) - 1 - row
        for x, char in enumerate(line[1:]):
            if char in target_chars:
                targets.append((Point(x, y), char))
            elif char not in _BACKGROUND:
                catapults.append(y)
    return catapults, targets


def _cheapest(catapults: Iterable[int], target: Point, weight: int = 1) -> int:
    rankings = [
        power * height * weight
        for height in catapults
        if (power := can_hit(height, target)) != -1
    ]
    if not rankings:
        raise ValueError(f"no catapult can hit the target at {target}")
    return min(rankings)


def part1(lines: Sequence[str]) -> int:
    """Total ranking of the cheapest shots at every ``T`` target."""
    catapults, targets = _parse(lines, "T")
    return sum(_cheapest(catapults, target) for target, _ in targets)


def part2(lines: Sequence[str]) -> int:
    """Total ranking where hard ``H`` targets count twice."""
    catapults, targets = _parse(lines, "TH")
    return sum(_cheapest(catapults, target, 2 if kind == "H" else 1) for target, kind in targets)


def part3(lines: Iterable[str]) -> int:
    """Total ranking of shots at targets given as ``x y`` lines."""
    total = 0
    for line in lines:
        coords = helpers.split(line, " ")
        if len(coords) < 2:
            raise ValueError(f"not a target: {line!r}")
        target = Point(int(coords[0]), int(coords[1]) + 1)
        total += _cheapest(PART3_CATAPULTS, target)
    return total