"""Clap dance: knights move between columns and shout the row of heads."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from questbook import helpers

Columns = list[list[int]]
Landing = Callable[[int, int], int]

_CHECK_AMOUNT = 2024


class Bucket:
    """Counts how often each shout was heard and in which rounds."""

    def __init__(self, check_for: int) -> None:
        self.check_for = check_for
        self._seen: dict[int, list[int]] = {}

    def collect(self, cry: int, index: int) -> bool:
        """Record ``cry`` in round ``index``; true when it reaches the check count."""
        rounds = self._seen.setdefault(cry, [])
        rounds.append(index)
        return len(rounds) == self.check_for

    def report(self) -> str:
        """List the shouts heard more than 25 times, with their rounds."""
        return "".join(
            f"{cry}:{len(rounds)} [ {', '.join(map(str, rounds))} ]\n"
            for cry, rounds in sorted(self._seen.items())
            if len(rounds) > 25
        )


def parse_columns(lines: Iterable[str]) -> Columns:
    """Read rows of numbers and return them as columns."""
    rows = [[int(value) for value in helpers.split(line)] for line in lines]
    if not rows:
        raise ValueError("no dancers")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("rows must all have the same length")
    return [list(column) for column in zip(*rows)]


def render_dance(columns: Sequence[Sequence[int]], height: int) -> str:
    """Render the columns side by side, ``height`` rows tall."""
    return "".join(
        "".join(f"{column[y] if len(column) > y else ' '} " for column in columns) + "\n"
        for y in range(height)
    )


def _walk_landing(clapper: int, length: int) -> int:
    """Walk down the next column and back up, one step per clap."""
    index = -1
    right_side = False
    for _ in range(clapper):
        if not right_side:
            index += 1
            if index == length:
                index -= 1
                right_side = True
        else:
            index -= 1
            if index < 0:
                index += 1
                right_side = False
    return index + right_side


def _formula_landing(clapper: int, length: int) -> int:
    right_side = bool(clapper // length % 2) if length > 1 else clapper % 2 == 0
    index = abs(clapper % length - 1 - (length - 2 if right_side else 0))
    return index + right_side


def _clap(columns: Columns, current: int, landing: Landing) -> int:
    following = (current + 1) % len(columns)
    clapper = columns[current][0]
    position = landing(clapper, len(columns[following]))
    columns[following].insert(position, clapper)
    del columns[current][0]
    return following


def _cry(columns: Columns, base: int) -> int:
    last = len(columns) - 1
    return sum(column[0] * base ** (last - place) for place, column in enumerate(columns))


def part1(lines: Iterable[str]) -> int:
    """The shout after ten rounds."""
    columns = parse_columns(lines)
    current = 0
    cry = 0
    for _ in range(10):
        current = _clap(columns, current, _walk_landing)
        cry = int("".join(str(column[0]) for column in columns))
    return cry


def part2(lines: Iterable[str], rounds: int = 1_000_000_000) -> int:
    """The first shout heard 2024 times, times the round it was heard in; 0 if none."""
    columns = parse_columns(lines)
    base = 100 if columns[0][0] > 10 else 10
    cries = Bucket(_CHECK_AMOUNT)
    current = 0
    for index in range(rounds):
        current = _clap(columns, current, _formula_landing)
        cry = _cry(columns, base)
        if cries.collect(cry, index):
            return cry * (index + 1)
    return 0


def part3(lines: Iterable[str], rounds: int = 100_000_000) -> int:
    """The largest shout heard over all rounds."""
    columns = parse_columns(lines)
    first = columns[0][0]
    base = (10000 if first > 1000 else 100) if first > 10 else 0
    current = 0
    best = 0
    for _ in range(rounds):
        current = _clap(columns, current, _formula_landing)
        best = max(best, _cry(columns, base))
    return best