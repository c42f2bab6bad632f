import pytest

from advent2024.day04 import count_x_mas, count_xmas, main
from advent2024.grid import Grid


@pytest.mark.parametrize(
    ("rows", "expected"),
    [
        (["XMAS"], 1),
        (["SAMX"], 1),
        (["XMASAMX"], 2),
        (["X", "M", "A", "S"], 1),
        (["X...", ".M..", "..A.", "...S"], 1),
        (["...S", "..A.", ".M..", "X..."], 1),
        (["XMA."], 0),
        (["...."], 0),
    ],
)
def test_count_xmas(rows, expected):
    assert count_xmas(Grid(rows)) == expected


@pytest.mark.parametrize(
    ("rows", "expected"),
    [
        (["M.S", ".A.", "M.S"], 1),
        (["M.M", ".A.", "S.S"], 1),
        (["S.S", ".A.", "M.M"], 1),
        (["M.M", ".A.", "M.M"], 0),
        (["M.S", ".A.", "S.M"], 0),
        ([".A."], 0),
    ],
)
def test_count_x_mas(rows, expected):
    assert count_x_mas(Grid(rows)) == expected


def test_main(tmp_path, capsys):
    path = tmp_path / "data"
    path.write_text("M.S\n.A.\nM.S\n", encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Part 1: 0" in out
    assert "Part 2: 1" in out