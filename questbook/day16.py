"""Cat-face slot machine: wheels of faces spin and matching symbols pay coins."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from itertools import product

from questbook import helpers

PART1_ROUNDS = 100
PART2_ROUNDS = 202_420_242_024
PART3_DEPTH = 2
_BLANK = "   "

Wheels = list[list["CatFace"]]


@dataclass
class CatFace:
    """A three-symbol face; the first and third symbols are its eyes."""

    face: str
    symbols: Counter[str] = field(init=False, repr=False, compare=False)
    eyes: Counter[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.face) < 3:
            raise ValueError(f"a face needs three symbols: {self.face!r}")
        self.symbols = Counter(self.face)
        self.eyes = Counter((self.face[0], self.face[2]))


def symbol_counts(faces: Iterable[CatFace], eyes_only: bool = False) -> Counter[str]:
    """Count the symbols showing on ``faces``, or only their eyes."""
    counts: Counter[str] = Counter()
    for face in faces:
        counts.update(face.eyes if eyes_only else face.symbols)
    return counts


def score(counts: Mapping[str, int]) -> int:
    """Coins won: each symbol seen three or more times pays its count less two."""
    return sum(count - 2 for count in counts.values() if count >= 3)


class LinkedNode:
    """One arrangement of the wheels, linked to the arrangements it can lead to."""

    def __init__(self, positions: Sequence[int], wheels: Sequence[Sequence[CatFace]]) -> None:
        self.positions = tuple(positions)
        self.faces = [wheel[position] for wheel, position in zip(wheels, self.positions)]
        self.value = score(symbol_counts(self.faces, True))
        self.up: LinkedNode | None = None
        self.down: LinkedNode | None = None
        self.next: LinkedNode | None = None

    def up_position(self, wheels: Sequence[Sequence[CatFace]]) -> tuple[int, ...]:
        """Positions with every wheel turned back by one face."""
        return tuple((p - 1) % len(wheel) for p, wheel in zip(self.positions, wheels))

    def down_position(self, wheels: Sequence[Sequence[CatFace]]) -> tuple[int, ...]:
        """Positions with every wheel turned on by one face."""
        return tuple((p + 1) % len(wheel) for p, wheel in zip(self.positions, wheels))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedNode):
            return NotImplemented
        return self.positions == other.positions

    def __hash__(self) -> int:
        return hash(self.positions)

    def __lt__(self, other: LinkedNode) -> bool:
        return self.value < other.value

    def __repr__(self) -> str:
        return f"LinkedNode(positions={self.positions}, value={self.value})"


def parse_machine(lines: Sequence[str]) -> tuple[list[int], Wheels]:
    """Read the spin counts of the first line and the wheel columns below the blank line."""
    if not lines:
        raise ValueError("the machine description is empty")
    spins = [int(spin) for spin in helpers.split(lines[0], ",")]
    wheels: Wheels = []
    for index in range(len(spins)):
        start = 4 * index
        wheel = [
            CatFace(line[start:start + 3])
            for line in lines[2:]
            if start < len(line) and line[start:start + 3] != _BLANK
        ]
        if not wheel:
            raise ValueError(f"wheel {index + 1} has no faces")
        wheels.append(wheel)
    return spins, wheels


def _spin(spins: Sequence[int], wheels: Wheels) -> Iterator[tuple[list[int], list[CatFace]]]:
    positions = [0] * len(wheels)
    while True:
        positions = [(p + s) % len(wheel) for p, s, wheel in zip(positions, spins, wheels)]
        yield positions, [wheel[p] for wheel, p in zip(wheels, positions)]


def generate_combinations(wheels: Sequence[Sequence[CatFace]]) -> list[tuple[int, ...]]:
    """Every choice of one position per wheel, in sorted order."""
    return list(product(*(range(len(wheel)) for wheel in wheels)))


def get_limit(node: LinkedNode, maximize: bool, depth: int = 0, max_depth: int = 256) -> int:
    """Best (or worst) coins over the next pulls, nudging the lever up, down or not at all."""
    if depth == max_depth:
        return node.value
    if node.next is None or node.up is None or node.down is None:
        raise ValueError("the node is not linked")
    if node.up.next is None or node.down.next is None:
        raise ValueError("the node's neighbours are not linked")
    options = [
        get_limit(following, maximize, depth + 1, max_depth)
        for following in (node.next, node.up.next, node.down.next)
    ]
    best = max(options) if maximize else min(options)
    if depth == 0:
        return best
    return node.value + best


def _link(nodes: Sequence[LinkedNode], spins: Sequence[int], wheels: Wheels) -> None:
    by_position = {node.positions: node for node in nodes}
    for node in nodes:
        node.next = by_position[
            tuple((p + s) % len(wheel) for p, s, wheel in zip(node.positions, spins, wheels))
        ]
        node.up = by_position[node.up_position(wheels)]
        node.down = by_position[node.down_position(wheels)]


def part1(lines: Sequence[str]) -> str:
    """The faces showing after a hundred pulls, separated by spaces."""
    spins, wheels = parse_machine(lines)
    faces: list[CatFace] = []
    spinning = _spin(spins, wheels)
    for _ in range(PART1_ROUNDS):
        _, faces = next(spinning)
    return " ".join(face.face for face in faces)


def part2(lines: Sequence[str]) -> int:
    """Coins won, counting eyes only, over 202420242024 pulls."""
    spins, wheels = parse_machine(lines)
    cycle: list[int] = []
    for positions, faces in _spin(spins, wheels):
        cycle.append(score(symbol_counts(faces, True)))
        if not any(positions):
            break
    full, rest = divmod(PART2_ROUNDS, len(cycle))
    return sum(cycle) * full + sum(cycle[:rest])


def part3(lines: Sequence[str]) -> tuple[int, int]:
    """Most and fewest coins reachable from the starting arrangement in a short lookahead."""
    spins, wheels = parse_machine(lines)
    nodes = [LinkedNode(combo, wheels) for combo in generate_combinations(wheels)]
    _link(nodes, spins, wheels)
    start = nodes[0]
    return (
        get_limit(start, True, 0, PART3_DEPTH),
        get_limit(start, False, 0, PART3_DEPTH),
    )