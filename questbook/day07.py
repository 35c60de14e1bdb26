"""Chariot race: rank the knights' action plans by the power they gather."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from itertools import accumulate, product
from operator import add, mul

from questbook import helpers

START_POWER = 10

PART2_TRACK = (
    "-=++=-==++=++=-=+=-=+=+=--=-=++=-==++=-+=-=+=-=+=+=++=-+==++=++=-=-=---=++==--+++==++=+=--==++=="
    "+++=++=+++=--=+=-=+=-+=-+=-+-=+=-=+=-+++=+==++++==---=+=+=-S"
)

TRACK_GRID = (
    "S+= +=-== +=++=     =+=+=--=    =-= ++=     +=-  =+=++=-+==+ =++=-=-=--",
    "- + +   + =   =     =      =   == = - -     - =  =         =-=        -",
    "= + + +-- =-= ==-==-= --++ +  == == = +     - =  =    ==++=    =++=-=++",
    "+ + + =     +         =  + + == == ++ =     = =  ==   =   = =++=       ",
    "= = + + +== +==     =++ == =+=  =  +  +==-=++ =   =++ --= + =          ",
    "+ ==- = + =   = =+= =   =       ++--          +     =   = = =--= ==++==",
    "=     ==- ==+-- = = = ++= +=--      ==+ ==--= +--+=-= ==- ==   =+=    =",
    "-               = = = =   +  +  ==+ = = +   =        ++    =          -",
    "-               = + + =   +  -  = + = = +   =        +     =          -",
    "--==++++==+=+++-= =-= =-+-=  =+-= =-= =--   +=++=+++==     -=+=++==+++-",
)

OPPONENT_STEPS = "=-=+=+-++-+"
PART3_COUNTS = {"=": 3, "-": 3, "+": 5}
PART3_LENGTH = 11
PART3_LAPS = 11

_DELTA = {"+": 1, "-": -1}
_PLAN_DRIVEN = frozenset("=S")
_TRACK_CHARS = frozenset("+-=S")


@dataclass
class Plan:
    """A knight's repeating list of actions and the power it gathered."""

    label: str
    steps: list[str]
    current_index: int = -1
    total: int = field(default=0, compare=False)

    def next(self) -> str:
        """Return the next action, starting over after the last."""
        if not self.steps:
            raise ValueError(f"plan {self.label!r} has no steps")
        self.current_index = (self.current_index + 1) % len(self.steps)
        return self.steps[self.current_index]


def parse_plan(line: str) -> Plan:
    """Read a ``label:a,b,c`` line."""
    parts = helpers.split(line, ":")
    if len(parts) < 2:
        raise ValueError(f"not a plan: {line!r}")
    return Plan(parts[0], [step[0] for step in helpers.split(parts[1], ",")])


def generate_plans(counts: Mapping[str, int], length: int) -> Iterator[str]:
    """Yield, in sorted order, every plan of ``length`` using each action exactly as often as ``counts`` says."""
    wanted = Counter({action: count for action, count in counts.items() if count})
    for combo in product(sorted(counts), repeat=length):
        if Counter(combo) == wanted:
            yield "".join(combo)


def track_map() -> str:
    """Walk the track grid from the start and return its segments, ending at ``S``."""
    height = len(TRACK_GRID)
    width = len(TRACK_GRID[0])
    moves = ((0, -1), (1, 0), (0, 1), (-1, 0))
    previous = current = (0, 0)
    direction = 1
    track = []
    while True:
        dx, dy = moves[direction]
        nx, ny = current[0] + dx, current[1] + dy
        if not (0 <= nx < width and 0 <= ny < height) or TRACK_GRID[ny][nx] == " " or (nx, ny) == previous:
            direction = (direction + 1) % 4
            continue
        segment = TRACK_GRID[ny][nx]
        track.append(segment)
        previous, current = current, (nx, ny)
        if segment == "S":
            return "".join(track)


def race(plan: Plan, track: str, laps: int) -> int:
    """Run ``plan`` over ``track`` for ``laps`` laps and return the power gathered.

    ``+`` and ``-`` segments change the power regardless of the plan; on ``=``
    and ``S`` the plan's next action applies. The plan carries on where it
    left off, and its ``total`` is set to the result.
    """
    unknown = set(track) - _TRACK_CHARS
    if unknown:
        raise ValueError(f"unknown track segments: {''.join(sorted(unknown))}")
    steps = len(track) * max(laps, 0)
    if steps == 0:
        plan.total = 0
        return 0
    if not plan.steps:
        raise ValueError(f"plan {plan.label!r} has no steps")

    fixed = [_DELTA.get(segment, 0) for segment in track] * laps
    open_ = [int(segment in _PLAN_DRIVEN) for segment in track] * laps
    cycle = [_DELTA.get(step, 0) for step in plan.steps]
    size = len(cycle)
    start = (plan.current_index + 1) % size
    rotated = cycle[start:] + cycle[:start]
    chosen = (rotated * (steps // size + 1))[:steps]

    deltas = map(add, fixed, map(mul, open_, chosen))
    total = sum(accumulate(deltas, initial=START_POWER)) - START_POWER
    plan.current_index = (plan.current_index + steps) % size
    plan.total = total
    return total


def _ranking(plans: Iterable[Plan]) -> str:
    return "".join(plan.label for plan in sorted(plans, key=lambda plan: plan.total, reverse=True))


def part1(lines: Iterable[str]) -> str:
    """Plan labels ordered by power after ten plain segments."""
    plans = [parse_plan(line) for line in lines]
    for plan in plans:
        race(plan, "=" * 10, 1)
    return _ranking(plans)


def part2(lines: Iterable[str]) -> str:
    """Plan labels ordered by power after ten laps of the fixed track."""
    plans = [parse_plan(line) for line in lines]
    for plan in plans:
        race(plan, PART2_TRACK, 10)
    return _ranking(plans)


def part3(lines: Iterable[str]) -> str:
    """How many possible plans beat the opponent's over the mapped track."""
    track = track_map()
    opponent = race(Plan("opponent", list(OPPONENT_STEPS)), track, PART3_LAPS)
    winners = 0
    for index, steps in enumerate(generate_plans(PART3_COUNTS, PART3_LENGTH)):
        if race(Plan(str(index), list(steps)), track, PART3_LAPS) > opponent:
            winners += 1
    return str(winners)