import pytest

from questbook import cli, day11

RULES = ["A:B,C", "B:A", "C:A", "Z:A"]


@pytest.fixture
def inputs(tmp_path):
    folder = tmp_path / "Day11"
    folder.mkdir()
    for part in (1, 2, 3):
        (folder / f"Part{part}.txt").write_text("\n".join(RULES) + "\n", encoding="utf-8")
    return tmp_path


def test_run_day_yields_each_part(inputs):
    lines = list(cli.run_day(11, inputs))
    assert lines == [
        f"Day 11 - Part 1: {day11.part1(RULES)}",
        f"Day 11 - Part 2: {day11.part2(RULES)}",
        f"Day 11 - Part 3: {day11.part3(RULES)}",
    ]


def test_run_day_unknown_day_raises():
    with pytest.raises(ValueError):
        cli.run_day(1)


def test_run_day_missing_input_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(cli.run_day(11, tmp_path))


def test_main_prints_header_and_answers(inputs, capsys):
    assert cli.main(["11", "--base-dir", str(inputs)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] in ("Running on Linux", "Running on Windows")
    assert out[1] == ""
    assert out[2].startswith("Current dir: ")
    assert out[3] == f"Day 11 - Part 1: {day11.part1(RULES)}"
    assert len(out) == 6


def test_main_unknown_day_prints_tilt(capsys):
    assert cli.main(["99"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "TILT"


def test_main_missing_input_fails(tmp_path, capsys):
    assert cli.main(["11", "--base-dir", str(tmp_path)]) == 1
    assert "Unable to open file" in capsys.readouterr().err