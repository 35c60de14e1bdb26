"""Levelling nails: strike every nail until all stand at the same height."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_OFFSET = 27_000_000
_ALERT = "\033[31;4m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class Alignment:
    """Strikes needed to bring every nail to ``goal``."""

    goal: int
    ups: int
    downs: int
    total: int


def _parse(lines: Iterable[str]) -> list[int]:
    return [int(line) for line in lines]


def _level_to_lowest(nails: Sequence[int]) -> int:
    minimum = 0
    for nail in nails:
        if minimum == 0 or nail < minimum:
            minimum = nail
    return sum(nail - minimum for nail in nails)


def _align(nails: Iterable[int], goal: int) -> Alignment:
    ups = downs = 0
    for nail in nails:
        if nail < goal:
            ups += goal - nail
        else:
            downs += nail - goal
    return Alignment(goal, ups, downs, ups + downs)


def alignment_totals(nails: Sequence[int]) -> list[Alignment]:
    """Return the cost of levelling to one past the mean, then to each nail in order."""
    if not nails:
        raise ValueError("no nails to align")
    running = sum(nails)
    mean = abs(running) // len(nails)
    if running < 0:
        mean = -mean
    ordered = sorted(nails)
    return [_align(nails, mean + 1)] + [_align(ordered, goal) for goal in ordered]


def render_table(totals: Sequence[Alignment]) -> str:
    """Render the alignments as a table, highlighting the cheapest row."""
    lowest_total = 0
    lowest_index = 0
    for index, alignment in enumerate(totals):
        if lowest_total == 0 or lowest_total > alignment.total:
            lowest_total = alignment.total
            lowest_index = index

    header = f"{'Average':>10} |{'Ups':>10} |{'Downs':>10} |{'Total':>10}\n"
    rows = [
        (_ALERT if index == lowest_index else _RESET)
        + f"{a.goal:>10} |{a.ups:>10} |{a.downs:>10} |{a.total:>10}\n"
        for index, a in enumerate(totals)
    ]
    return "\n" + header + "".join(rows)


def part1(lines: Iterable[str]) -> int:
    """Strikes needed to hammer every nail down to the lowest one."""
    return _level_to_lowest(_parse(lines))


def part2(lines: Iterable[str]) -> int:
    """Strikes needed to hammer every nail down to the lowest one."""
    return _level_to_lowest(_parse(lines))


def part3(lines: Iterable[str]) -> int:
    """Strikes, up or down, to level every nail to the tallest nail."""
    nails = [nail - _OFFSET for nail in _parse(lines)]
    return alignment_totals(nails)[-1].total