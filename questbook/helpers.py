"""Shared helpers: input loading, string splitting and grid points."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_COLORS = (
    (31, "Red"),
    (91, "Bright Red"),
    (35, "Magenta"),
    (95, "Bright Magenta"),
    (32, "Green"),
    (92, "Bright Green"),
    (33, "Yellow"),
    (93, "Bright Yellow"),
    (36, "Cyan"),
    (96, "Bright Cyan"),
    (34, "Blue"),
    (94, "Bright Blue"),
    (37, "White"),
    (97, "Bright White"),
)


@dataclass(frozen=True)
class Point:
    """A grid position.

    ``<`` orders row by row (y, then x); ``>`` compares column first (x, then y).
    """

    x: int = 0
    y: int = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) > (other.x, other.y)


@dataclass(frozen=True)
class Point3(Point):
    """A position in space, ordered by z, then y, then x."""

    z: int = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Point3):
            return NotImplemented
        return (self.z, self.y, self.x) < (other.z, other.y, other.x)


def pwd() -> str:
    """Return the current working directory."""
    return os.getcwd()


def color_reference() -> str:
    """Return a sample of each terminal colour with its ANSI code."""
    return "\n".join(f"\033[{code}m{name}\033[0m {code}" for code, name in _COLORS)


def read_file(path: str | os.PathLike, base_dir: str | os.PathLike | None = None) -> list[str]:
    """Read a text file relative to ``base_dir`` (default: the working directory) as lines."""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    with open(base / path, encoding="utf-8") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_day(day: int, part: int, base_dir: str | os.PathLike | None = None) -> list[str]:
    """Read the input of one part of one day, ``Day<day>/Part<part>.txt``."""
    return read_file(Path(f"Day{day}") / f"Part{part}.txt", base_dir)


def split(text: str, on: str = " ") -> list[str]:
    """Split ``text`` on ``on``, dropping empty tokens."""
    return [token for token in text.split(on) if token]


def split_into_chars(text: str) -> list[str]:
    """Return the characters of ``text`` as a list."""
    return list(text)


def left_pad(number: int, width: int) -> str:
    """Right-align ``number`` in a field of ``width`` characters."""
    return str(number).rjust(width)