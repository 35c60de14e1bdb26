"""Runic shrine: read the hidden word of each 8x8 rune grid."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence

from questbook.helpers import Point

UNKNOWN = "?"
NO_MATCH = "\0"
EMPTY = "."
_BORDER = (0, 1, 6, 7)
_INNER = range(2, 6)
_SIZE = 8
_ORIGIN = Point(0, 0)

Grid = Sequence[Sequence[str]]


def valid_word(word: str) -> bool:
    """True when no rune of ``word`` is still unknown."""
    return UNKNOWN not in word


def calculate_power(word: str) -> int:
    """Sum each letter's alphabet position times its place in the word."""
    return sum(
        (ord(char) - ord("A") + 1) * place
        for place, char in enumerate(word, start=1)
        if "A" <= char <= "Z"
    )


def _column(grid: Grid, x: int, origin: Point, rows: Sequence[int]) -> list[str]:
    return [grid[row + origin.y][x + origin.x] for row in rows]


def _row(grid: Grid, y: int, origin: Point, columns: Sequence[int]) -> list[str]:
    return [grid[y + origin.y][column + origin.x] for column in columns]


def search_for_match(grid: Grid, x: int, y: int, origin: Point = _ORIGIN, blank: str = NO_MATCH) -> str:
    """Return the first border rune of column ``x`` also on the border of row ``y``, or ``blank``."""
    across = set(_row(grid, y, origin, _BORDER))
    for rune in _column(grid, x, origin, _BORDER):
        if rune in across:
            return rune
    return blank


def find_missing(grid: Grid, x: int, y: int, origin: Point = _ORIGIN) -> str:
    """Deduce the rune at (x, y) from the one rune its row or column holds only once.

    Returns ``?`` when the row or column has more than one unknown, or when
    nothing can be deduced.
    """
    down = _column(grid, x, origin, range(_SIZE))
    across = _row(grid, y, origin, range(_SIZE))
    if down.count(UNKNOWN) > 1 or across.count(UNKNOWN) > 1:
        return UNKNOWN
    down_counts = Counter(down)
    across_counts = Counter(across)
    for down_rune, across_rune in zip(down, across):
        if across_counts[across_rune] == 1 and across_rune != UNKNOWN:
            return across_rune
        if down_counts[down_rune] == 1 and down_rune != UNKNOWN:
            return down_rune
    return UNKNOWN


def fill_in(grid: Sequence[MutableSequence[str]], x: int, y: int, origin: Point, missing: str) -> None:
    """Write ``missing`` over the unknown border rune of column ``x`` or row ``y`` that lacks it."""
    down = _column(grid, x, origin, range(_SIZE))
    across = _row(grid, y, origin, range(_SIZE))
    if down.count(missing) < 2:
        if UNKNOWN in down:
            grid[down.index(UNKNOWN) + origin.y][x + origin.x] = missing
    elif across.count(missing) < 2:
        if UNKNOWN in across:
            grid[y + origin.y][across.index(UNKNOWN) + origin.x] = missing


def _read_word(grid: Grid, origin: Point, blank: str) -> str:
    return "".join(search_for_match(grid, x, y, origin, blank) for y in _INNER for x in _INNER)


def part1(lines: Sequence[str]) -> str:
    """The runic word of a single grid."""
    return _read_word(lines, _ORIGIN, NO_MATCH)


def part2(lines: Sequence[str]) -> int:
    """Total power of every grid in a block of grids separated by one blank line or column."""
    if not lines:
        return 0
    rows = (len(lines) + 1) // (_SIZE + 1)
    columns = (len(lines[0]) + 1) // (_SIZE + 1)
    return sum(
        calculate_power(_read_word(lines, Point((_SIZE + 1) * i, (_SIZE + 1) * j), NO_MATCH))
        for j in range(rows)
        for i in range(columns)
    )


def _solve(grid: list[list[str]], origin: Point) -> str:
    word = []
    for y in _INNER:
        for x in _INNER:
            rune = search_for_match(grid, x, y, origin, EMPTY)
            grid[y + origin.y][x + origin.x] = rune
            word.append(rune)
    for index, rune in enumerate(word):
        if rune != UNKNOWN:
            continue
        x = index % 4 + 2
        y = index // 4 + 2
        missing = find_missing(grid, x, y, origin)
        if missing != UNKNOWN:
            grid[y + origin.y][x + origin.x] = missing
            fill_in(grid, x, y, origin, missing)
            word[index] = missing
    return "".join(word)


def part3(lines: Sequence[str]) -> int:
    """Total power of the overlapping grids that can be solved, retrying while progress is made."""
    if not lines:
        return 0
    grid = [list(line) for line in lines]
    width = (len(lines[0]) - 2) // 6
    height = (len(lines) - 2) // 6
    pending = [Point(6 * x, 6 * y) for y in range(height) for x in range(width)]

    total = 0
    first_pass = True
    while pending:
        unsolved = []
        for origin in pending:
            word = _solve(grid, origin)
            if valid_word(word):
                total += calculate_power(word)
            else:
                unsolved.append(origin)
        if not first_pass and len(unsolved) == len(pending):
            break
        first_pass = False
        pending = unsolved
    return total