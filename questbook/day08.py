"""Shrine building: how many blocks short the tower falls."""

from __future__ import annotations

from collections.abc import Sequence

PART2_ACOLYTES = 1111
PART2_MATERIAL = 20_240_000
PART3_ACOLYTES = 10
PART3_MATERIAL = 202_400_000


def width_of_tower(height: int) -> int:
    """Width of the layer at ``height``, counting from one at the top."""
    return 1 + 2 * (height - 1)


def total_blocks(height: int) -> int:
    """Blocks in a solid pyramid ``height`` layers tall."""
    return sum(width_of_tower(level) for level in range(1, height + 1))


def _first_number(lines: Sequence[str]) -> int:
    if not lines:
        raise ValueError("no input")
    return int(lines[0])


def part1(lines: Sequence[str]) -> int:
    """Width of the first pyramid that runs out of blocks, times the blocks missing."""
    available = _first_number(lines)
    height = 0
    used = 0
    while used <= available:
        height += 1
        used = total_blocks(height)
    return width_of_tower(height) * (used - available)


def part2(lines: Sequence[str]) -> int:
    """Width times missing blocks when layers thicken by the priests' rule."""
    priests = _first_number(lines)
    height = 1
    used = 1
    thickness = 1
    while used <= PART2_MATERIAL:
        height += 1
        thickness = (thickness * priests) % PART2_ACOLYTES
        if thickness == 0:
            raise ValueError("layers stop growing; the tower can never use up the material")
        used += thickness * width_of_tower(height)
    return width_of_tower(height) * (used - PART2_MATERIAL)


def _removed(priests: int, width: int, column: int) -> int:
    return (priests * width * column) % PART3_ACOLYTES


def part3(lines: Sequence[str]) -> int:
    """Blocks missing from the hollowed shrine once it outgrows the material."""
    priests = _first_number(lines)
    height = 1
    used = 1
    shell = 1
    thickness = 1
    columns = [1]
    while shell <= PART3_MATERIAL:
        height += 1
        thickness = (thickness * priests) % PART3_ACOLYTES + PART3_ACOLYTES
        width = width_of_tower(height)
        used += thickness * width
        columns = [column + thickness for column in columns]
        columns.append(thickness)
        shell = used - _removed(priests, width, columns[0]) - sum(
            2 * _removed(priests, width, column) for column in columns[1:-1]
        )
    return shell - PART3_MATERIAL