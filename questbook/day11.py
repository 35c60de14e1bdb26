"""Termite breeding: how large a population grows from one ancestor."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from questbook import helpers

Conversions = dict[str, list[str]]


def parse_conversions(lines: Iterable[str]) -> Conversions:
    """Read ``parent:child,child`` lines; the first rule for a parent wins."""
    conversions: Conversions = {}
    for line in lines:
        parts = helpers.split(line, ":")
        if len(parts) < 2:
            raise ValueError(f"not a conversion rule: {line!r}")
        conversions.setdefault(parts[0], helpers.split(parts[1], ","))
    return conversions


def population_size(conversions: Mapping[str, Sequence[str]], start: str, rounds: int) -> int:
    """Size of the population grown from one ``start`` termite over ``rounds`` days.

    A termite without a rule leaves no offspring.
    """
    population: Counter[str] = Counter({start: 1})
    for _ in range(rounds):
        offspring: Counter[str] = Counter()
        for termite, count in population.items():
            for child in conversions.get(termite, ()):
                offspring[child] += count
        population = offspring
    return sum(population.values())


def part1(lines: Iterable[str]) -> int:
    """Population after four days, starting from one ``A``."""
    return population_size(parse_conversions(lines), "A", 4)


def part2(lines: Iterable[str]) -> int:
    """Population after ten days, starting from one ``Z``."""
    return population_size(parse_conversions(lines), "Z", 10)


def part3(lines: Iterable[str]) -> int:
    """Spread between the largest and smallest twenty-day population over all starters."""
    conversions = parse_conversions(lines)
    if not conversions:
        raise ValueError("no conversion rules")
    sizes = [population_size(conversions, start, 20) for start in conversions]
    return max(sizes) - min(sizes)