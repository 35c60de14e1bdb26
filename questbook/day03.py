"""Mining the sand pit: dig ever deeper below each cell of the marked area."""

from __future__ import annotations

from collections.abc import Sequence

_RESET = "\033[0m"
_COLORS = (
    "\033[0m",
    "\033[94m", "\033[34m", "\033[96m", "\033[93m",
    "\033[33m", "\033[92m", "\033[32m", "\033[95m",
    "\033[35m", "\033[91m", "\033[31m", "\033[94m",
    "\033[34m", "\033[96m", "\033[93m", "\033[33m",
    "\033[92m", "\033[32m", "\033[95m", "\033[35m",
    "\033[91m", "\033[31m",
)

_STRAIGHT = ((1, 0), (-1, 0), (0, 1), (0, -1))
_ALL_AROUND = ((0, 0), (1, 0), (-1, 0), (0, 1), (0, -1), (-1, -1), (1, -1), (1, 1), (-1, 1))

DepthMap = list[list[int]]


def dig_depths(lines: Sequence[str], diagonal: bool = False) -> DepthMap:
    """Return the depth dug below every cell of the map.

    Cells marked ``#`` start at depth 1. A cell is dug one level deeper while
    its four straight neighbours all reach the current depth. With
    ``diagonal`` the map is first framed by a ring of undug cells, and the
    cell itself and all eight neighbours must reach the current depth; the
    returned map then includes that frame.
    """
    rows = list(lines)
    if not rows:
        raise ValueError("the map is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("map rows must all have the same length")

    depths = [[1 if char == "#" else 0 for char in row] for row in rows]
    offsets = _STRAIGHT
    if diagonal:
        depths = [[0] * (width + 2)] + [[0, *row, 0] for row in depths] + [[0] * (width + 2)]
        offsets = _ALL_AROUND

    height = len(depths)
    width = len(depths[0])
    depth = 0
    holes: list[tuple[int, int]] = []
    while True:
        for x, y in holes:
            depths[y][x] = depth + 1
        depth += 1
        holes = [
            (x, y)
            for y in range(1, height - 1)
            for x in range(1, width - 1)
            if all(depths[y + dy][x + dx] == depth for dx, dy in offsets)
        ]
        if not holes:
            return depths


def render_map(depths: DepthMap) -> str:
    """Render a depth map with one colour per depth."""
    def cell(hole: int) -> str:
        colour = _COLORS[(hole - 1) % (len(_COLORS) - 1) + 1] if hole > 0 else _RESET
        return f"{colour}{hole}"

    return "".join("".join(cell(hole) for hole in row) + "\n" for row in depths)


def _total(depths: DepthMap) -> int:
    return sum(sum(row) for row in depths)


def part1(lines: Sequence[str]) -> int:
    """Total earth removed, digging by straight neighbours."""
    return _total(dig_depths(lines, False))


def part2(lines: Sequence[str]) -> int:
    """Total earth removed on the larger map, digging by straight neighbours."""
    return _total(dig_depths(lines, False))


def part3(lines: Sequence[str]) -> int:
    """Total earth removed, digging by all eight neighbours."""
    return _total(dig_depths(lines, True))