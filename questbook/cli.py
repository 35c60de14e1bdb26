"""Command line: print the answers of every part of one day."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator, Sequence

from questbook import (
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    helpers,
)

DEFAULT_DAY = 16

_DAYS = {
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    16: day16,
}


def _answers(day: int, base_dir: str | os.PathLike | None) -> Iterator[str]:
    module = _DAYS[day]
    for part, solve in enumerate((module.part1, module.part2, module.part3), start=1):
        if day == 2 and part == 1:
            answer = day02.part1()
        else:
            answer = solve(helpers.read_day(day, part, base_dir))
        yield f"Day {day} - Part {part}: {answer}"


def run_day(day: int, base_dir: str | os.PathLike | None = None) -> Iterator[str]:
    """Yield one answer line per part of ``day``, reading inputs under ``base_dir``."""
    if day not in _DAYS:
        raise ValueError(f"no solution for day {day}")
    return _answers(day, base_dir)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen day and print its answers."""
    parser = argparse.ArgumentParser(prog="questbook", description="Print the answers of one day.")
    parser.add_argument("day", nargs="?", type=int, default=DEFAULT_DAY)
    parser.add_argument("--base-dir", default=None, help="directory holding the DayN folders")
    args = parser.parse_args(argv)

    platform = "Windows" if sys.platform.startswith("win") else "Linux"
    print(f"Running on {platform}")
    print()
    print(f"Current dir: {helpers.pwd()}")

    if args.day not in _DAYS:
        print("TILT")
        return 0
    try:
        for line in run_day(args.day, args.base_dir):
            print(line)
    except OSError as error:
        print(f"Unable to open file: {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Cannot solve day {args.day}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())