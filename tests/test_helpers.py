import os

import pytest

from questbook.helpers import (
    Point,
    Point3,
    color_reference,
    left_pad,
    pwd,
    read_day,
    read_file,
    split,
    split_into_chars,
)


def test_point_less_than_orders_by_row_first():
    points = [Point(2, 1), Point(0, 1), Point(5, 0), Point(1, 0)]
    assert sorted(points) == [Point(1, 0), Point(5, 0), Point(0, 1), Point(2, 1)]


def test_point_greater_than_compares_column_first():
    assert Point(2, 0) > Point(1, 5)
    assert Point(2, 0) < Point(1, 5)
    assert not Point(1, 5) > Point(2, 0)


def test_point_equality_and_hashing():
    assert Point(3, 4) == Point(3, 4)
    assert len({Point(3, 4), Point(3, 4), Point(4, 3)}) == 2


def test_point3_orders_by_z_then_y_then_x():
    points = [Point3(0, 0, 1), Point3(1, 0, 0), Point3(0, 1, 0), Point3(0, 0, 0)]
    assert sorted(points) == [Point3(0, 0, 0), Point3(1, 0, 0), Point3(0, 1, 0), Point3(0, 0, 1)]


def test_point3_equality_includes_z():
    assert Point3(1, 2, 3) == Point3(1, 2, 3)
    assert not Point3(1, 2, 3) == Point3(1, 2, 4)


def test_pwd_matches_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert pwd() == os.getcwd()
    assert os.path.samefile(pwd(), tmp_path)


def test_color_reference_lists_each_colour():
    lines = color_reference().split("\n")
    assert lines[0] == "\033[31mRed\033[0m 31"
    assert lines[-1] == "\033[97mBright White\033[0m 97"
    assert len(lines) == 14


def test_read_file_returns_lines(tmp_path):
    (tmp_path / "input.txt").write_text("alpha\nbeta\n\ngamma\n", encoding="utf-8")
    assert read_file("input.txt", tmp_path) == ["alpha", "beta", "", "gamma"]


def test_read_file_without_trailing_newline(tmp_path):
    (tmp_path / "input.txt").write_text("one\ntwo", encoding="utf-8")
    assert read_file("input.txt", tmp_path) == ["one", "two"]


def test_read_file_defaults_to_working_directory(tmp_path, monkeypatch):
    (tmp_path / "input.txt").write_text("line\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert read_file("input.txt") == ["line"]


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file("absent.txt", tmp_path)


def test_read_day_uses_day_and_part_layout(tmp_path):
    day_dir = tmp_path / "Day7"
    day_dir.mkdir()
    (day_dir / "Part2.txt").write_text("A:+,-\n", encoding="utf-8")
    assert read_day(7, 2, tmp_path) == ["A:+,-"]


def test_split_on_spaces_drops_blanks():
    assert split("Hello  my  World!") == ["Hello", "my", "World!"]


def test_split_on_other_separator():
    assert split("A:B,C", ":") == ["A", "B,C"]
    assert split("B,C,,D", ",") == ["B", "C", "D"]


def test_split_without_separator_is_single_token():
    assert split("Hello!") == ["Hello!"]
    assert split("") == []


def test_split_into_chars_round_trip():
    chars = split_into_chars("QUEST")
    assert chars == ["Q", "U", "E", "S", "T"]
    assert "".join(chars) == "QUEST"


def test_left_pad_pads_to_width():
    assert left_pad(5, 3) == "  5"
    assert left_pad(12345, 3) == "12345"
    assert len(left_pad(-7, 6)) == 6