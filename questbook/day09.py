"""Sparkball beetles: the fewest stamped beetles adding up to each brightness."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

PART1_STAMPS = (10, 5, 3, 1)
PART2_STAMPS = (30, 25, 24, 20, 16, 15, 10, 5, 3, 1)
PART3_STAMPS = (1, 3, 5, 10, 15, 16, 20, 24, 25, 30, 37, 38, 49, 50, 74, 75, 100, 101)
PART3_MAX_GAP = 100


def _parse(lines: Iterable[str]) -> list[int]:
    return [int(line) for line in lines]


def min_coins_table(total: int, coins: Iterable[int]) -> list[int | None]:
    """Return the fewest coins making each amount from 0 to ``total``.

    An amount that cannot be made is ``None``. Coins of zero or less are ignored.
    """
    usable = sorted({coin for coin in coins if coin > 0})
    table: list[int | None] = [0] + [None] * max(total, 0)
    for amount in range(1, total + 1):
        options = [
            previous
            for coin in usable
            if coin <= amount and (previous := table[amount - coin]) is not None
        ]
        if options:
            table[amount] = min(options) + 1
    return table


def min_coins(total: int, coins: Iterable[int]) -> int:
    """Return the fewest coins adding up to ``total``, or -1 if none do."""
    if total < 0:
        return -1
    best = min_coins_table(total, coins)[total]
    return -1 if best is None else best


def part1(lines: Iterable[str]) -> int:
    """Beetles used when each brightness is made greedily from stamps 10, 5, 3 and 1."""
    used = 0
    for goal in _parse(lines):
        remaining = goal
        for stamp in PART1_STAMPS:
            count, remaining = divmod(remaining, stamp)
            used += count
    return used


def part2(lines: Iterable[str]) -> int:
    """Fewest beetles for every brightness; an impossible one counts as -1."""
    return sum(min_coins(goal, PART2_STAMPS) for goal in _parse(lines))


def _best_split(brightness: int, table: Sequence[int | None]) -> int:
    low = brightness // 2
    high = brightness - low
    steps = max((PART3_MAX_GAP - (high - low)) // 2, 0)
    options = [
        table[low - k] + table[high + k]  # type: ignore[operator]
        for k in range(steps + 1)
        if low - k >= 0 and table[low - k] is not None and table[high + k] is not None
    ]
    if not options:
        raise ValueError(f"brightness {brightness} cannot be split into two balls")
    return min(options)


def part3(lines: Iterable[str]) -> int:
    """Fewest beetles split over two balls whose brightness differs by at most 100."""
    numbers = _parse(lines)
    largest = max(numbers, default=0)
    table = min_coins_table(largest // 2 + 50, PART3_STAMPS)
    return sum(_best_split(brightness, table) for brightness in numbers)