import pytest

from questbook import day03

EXAMPLE = [
    "..........",
    "..###.##..",
    "...####...",
    "..######..",
    "..######..",
    "...####...",
    "..........",
]


def test_part1_example():
    assert day03.part1(EXAMPLE) == 35


def test_part3_example():
    assert day03.part3(EXAMPLE) == 29


def test_part2_matches_part1():
    assert day03.part2(EXAMPLE) == day03.part1(EXAMPLE)


def test_single_row_only_surface():
    line = ".####.##."
    assert day03.part1([line]) == line.count("#")


def test_no_marks_no_digging():
    lines = ["....", "...."]
    depths = day03.dig_depths(lines)
    assert all(value == 0 for row in depths for value in row)


def test_border_never_dug_deeper():
    lines = ["#####", "#####", "#####", "#####"]
    depths = day03.dig_depths(lines)
    border = depths[0] + depths[-1] + [row[0] for row in depths] + [row[-1] for row in depths]
    assert all(value == 1 for value in border)
    assert max(max(row) for row in depths) > 1


def test_diagonal_map_is_framed():
    depths = day03.dig_depths(EXAMPLE, diagonal=True)
    assert len(depths) == len(EXAMPLE) + 2
    assert all(len(row) == len(EXAMPLE[0]) + 2 for row in depths)
    assert depths[0] == [0] * (len(EXAMPLE[0]) + 2)


def test_diagonal_digs_no_deeper_than_straight():
    straight = max(max(row) for row in day03.dig_depths(EXAMPLE))
    diagonal = max(max(row) for row in day03.dig_depths(EXAMPLE, diagonal=True))
    assert diagonal <= straight


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        day03.dig_depths([])


def test_ragged_map_rejected():
    with pytest.raises(ValueError):
        day03.dig_depths(["###", "##"])


def test_render_map_colours():
    assert day03.render_map([[0, 1]]) == "\033[0m0\033[94m1\n"