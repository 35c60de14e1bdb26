import pytest

from questbook import day05

EXAMPLE = [
    "2 3 4 5",
    "3 4 5 2",
    "4 5 2 3",
    "5 2 3 4",
]


def test_parse_columns_transposes():
    assert day05.parse_columns(["1 2", "3 4", "5 6"]) == [[1, 3, 5], [2, 4, 6]]


def test_parse_columns_rejects_ragged_rows():
    with pytest.raises(ValueError):
        day05.parse_columns(["1 2", "3"])


def test_parse_columns_rejects_empty():
    with pytest.raises(ValueError):
        day05.parse_columns([])


def test_part1_example():
    assert day05.part1(EXAMPLE) == 2323


def test_part1_shout_uses_known_dancers():
    digits = set("".join(EXAMPLE).replace(" ", ""))
    assert set(str(day05.part1(EXAMPLE))) <= digits


def test_part2_needs_enough_rounds():
    assert day05.part2(EXAMPLE, rounds=50) == 0


def test_part3_single_round_small_numbers():
    # Heads of ten or less shout only the last column.
    assert day05.part3(EXAMPLE, rounds=1) == 5


def test_part3_never_decreases_with_more_rounds():
    results = [day05.part3(EXAMPLE, rounds=n) for n in range(1, 12)]
    assert results == sorted(results)


def test_bucket_collect_reports_exact_count():
    bucket = day05.Bucket(2)
    assert bucket.collect(5, 0) is False
    assert bucket.collect(7, 1) is False
    assert bucket.collect(5, 2) is True
    assert bucket.collect(5, 3) is False


def test_bucket_report_lists_frequent_cries():
    bucket = day05.Bucket(100)
    for index in range(26):
        bucket.collect(7, index)
    for index in range(25):
        bucket.collect(3, index)
    report = bucket.report()
    assert report.startswith("7:26 [ 0, 1, 2")
    assert report.endswith(", 25 ]\n")
    assert "3:" not in report


def test_render_dance():
    assert day05.render_dance([[1, 2], [3]], 2) == "1 3 \n2   \n"