"""Tree of branches: find the single path leading to the most powerful fruit."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from questbook import helpers

ROOT = "RR"
APPLE = "@"
_SKIPPED = frozenset({"BUG", "ANT"})
_RED = "\033[31m"
_RESET = "\033[0m"


@dataclass(eq=False)
class Node:
    """A branch of the tree; an ``@`` branch is a fruit."""

    label: str
    head: Node | None = field(default=None, repr=False)
    depth: int = 0
    apple: bool = False
    tails: list[Node] = field(default_factory=list)

    def add_tail(self, label: str) -> Node:
        """Grow a child branch called ``label`` and return it."""
        child = Node(label, self, self.depth + 1, label == APPLE)
        self.tails.append(child)
        return child


def _children(lines: Sequence[str], key: str) -> list[str]:
    for line in lines:
        parts = helpers.split(line, ":")
        if parts and parts[0] == key:
            return helpers.split(parts[1], ",") if len(parts) > 1 else []
    return []


def build_tree(root: Node, lines: Sequence[str]) -> Node:
    """Grow the tree below ``root`` from ``label:child,child`` lines, skipping pests."""
    for label in _children(lines, root.label):
        if label in _SKIPPED:
            continue
        build_tree(root.add_tail(label), lines)
    return root


def find_apples(root: Node, prefix: str) -> list[str]:
    """Return the path to every fruit, each branch named by its first letter."""
    paths = [prefix] if root.apple else []
    for child in root.tails:
        paths.extend(find_apples(child, prefix + child.label[:1]))
    return paths


def render_tree(root: Node) -> str:
    """Render the tree as nested, indented brackets."""
    indent = " " * root.depth
    if root.apple:
        return f"{indent}{_RED}{APPLE}{_RESET}\n"
    inner = "".join(render_tree(child) for child in root.tails)
    return f"{indent}{root.label}:[ \n{inner}{indent}]\n"


def _rendered(root: Node, depth: int) -> str:
    return render_tree(root)


def unique_path(lines: Sequence[str], prefix: str) -> str:
    """Return the path whose length no other fruit shares; the longest such one wins."""
    root = build_tree(Node(ROOT), lines)
    by_length: defaultdict[int, list[str]] = defaultdict(list)
    for path in find_apples(root, prefix):
        by_length[len(path)].append(path)
    result = ""
    for length in sorted(by_length):
        if len(by_length[length]) == 1:
            result = by_length[length][0]
    return result


def part1(lines: Sequence[str]) -> str:
    """The unique path, starting from the full root name."""
    return unique_path(lines, ROOT)


def part2(lines: Sequence[str]) -> str:
    """The unique path, with every branch shortened to its first letter."""
    return unique_path(lines, ROOT[:1])


def part3(lines: Sequence[str]) -> str:
    """The unique path on the large tree, branches shortened to their first letter."""
    return unique_path(lines, ROOT[:1])