import pytest

from questbook import day04


def test_part1_example():
    assert day04.part1(["3", "4", "7", "8"]) == 10


def test_part2_matches_part1():
    lines = ["12", "7", "31", "9"]
    assert day04.part2(lines) == day04.part1(lines)


def test_equal_nails_need_no_strikes():
    assert day04.part1(["6", "6", "6"]) == 0


def test_alignment_totals_shape():
    nails = [9, 1, 5]
    totals = day04.alignment_totals(nails)
    assert len(totals) == len(nails) + 1
    assert [a.goal for a in totals[1:]] == sorted(nails)
    assert all(a.total == a.ups + a.downs for a in totals)


def test_alignment_to_a_nail_leaves_it_alone():
    nails = [2, 8, 4]
    for alignment in day04.alignment_totals(nails)[1:]:
        others = [n for n in nails if n != alignment.goal]
        assert alignment.total == sum(abs(n - alignment.goal) for n in others)


def test_mean_truncates_toward_zero():
    assert day04.alignment_totals([-3, -4])[0].goal == -2


def test_alignment_of_no_nails_rejected():
    with pytest.raises(ValueError):
        day04.alignment_totals([])


def test_part3_levels_to_tallest():
    lines = ["27000001", "27000005", "27000003"]
    expected = day04.alignment_totals([1, 5, 3])[-1]
    assert expected.goal == 5
    assert day04.part3(lines) == expected.total


def test_part3_empty_rejected():
    with pytest.raises(ValueError):
        day04.part3([])


def test_render_table_highlights_cheapest():
    totals = day04.alignment_totals([1, 5, 9])
    text = day04.render_table(totals)
    assert text.startswith("\n   Average |       Ups |     Downs |     Total\n")
    highlighted = [row for row in text.split("\n") if row.startswith("\033[31;4m")]
    assert len(highlighted) == 1
    cheapest = min(a.total for a in totals)
    assert highlighted[0].endswith(f"{cheapest:>10}")