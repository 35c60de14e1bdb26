import pytest

from questbook.day12 import can_hit, get_power, part1, part2, part3, point_in_time
from questbook.helpers import Point

EXAMPLE = [
    ".............",
    ".C...........",
    ".B......T....",
    ".A......T.T..",
    "=============",
]


def test_part1_example():
    assert part1(EXAMPLE) == 13


def test_get_power_rejects_uneven_distance():
    assert get_power(7) == -1


def test_get_power_multiple_of_three():
    assert get_power(9) * 3 == 9


def test_can_hit_from_example():
    assert can_hit(1, Point(9, 1)) == 3


def test_can_hit_impossible():
    assert can_hit(2, Point(9, 1)) == -1


def test_point_in_time_moves_diagonally():
    assert point_in_time(Point(5, 7), 2) == Point(3, 5)


def test_point_in_time_zero_is_identity():
    assert point_in_time(Point(4, 8), 0) == Point(4, 8)


def test_part2_without_hard_targets_matches_part1():
    assert part2(EXAMPLE) == part1(EXAMPLE)


def test_part2_hard_targets_count_double():
    hard = [line.replace("T", "H") for line in EXAMPLE]
    assert part2(hard) == 2 * part1(EXAMPLE)


def test_part1_without_catapults_raises():
    with pytest.raises(ValueError):
        part1(["..T..", "====="])


def test_part3_is_additive():
    assert part3(["6 1", "10 5"]) == part3(["6 1"]) + part3(["10 5"])


def test_part3_rejects_malformed_line():
    with pytest.raises(ValueError):
        part3(["6"])


def test_part3_empty_input():
    assert part3([]) == 0