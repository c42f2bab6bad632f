import pytest

from advent2024.day02 import (
    count_safe,
    is_report_safe,
    is_report_safe_with_dampener,
    is_safe_step,
    main,
    parse_reports,
    read_reports,
    to_sign,
)


@pytest.mark.parametrize(
    "report",
    [
        [1, 1, 4, 5],
        [1, -1, 2, 4],
        [1, -5, 3, 5],
        [1, 5, 3, 1],
        [9, 5, 3, 1],
        [4, 5, 5, 7],
        [1, 3, 8, 5],
        [1, 3, 5, 5, 7],
        [1, 3, 5, 4, 7],
        [1, 3, 5, 9, 7],
        [1, 3, 5, 7, 70],
        [1, 3, 5, 7, 7],
        [83, 81, 82, 83, 85, 87, 90, 92],
    ],
)
def test_dampener_accepts(report):
    assert is_report_safe_with_dampener(report) is True


def test_dampener_rejects_two_bad_levels():
    assert is_report_safe_with_dampener([1, 2, 7, 8, 9]) is False


def test_dampener_does_not_mutate():
    report = [1, 3, 5, 9, 7]
    is_report_safe_with_dampener(report)
    assert report == [1, 3, 5, 9, 7]


def test_plain_safety():
    assert is_report_safe([7, 6, 4, 2, 1]) is True
    assert is_report_safe([1, 3, 2, 4, 5]) is False
    assert is_report_safe([8, 6, 4, 4, 1]) is False


def test_safe_step_rules():
    assert is_safe_step(1, 4, -1) is True
    assert is_safe_step(1, 5, -1) is False
    assert is_safe_step(3, 3, 0) is False
    assert is_safe_step(4, 3, -1) is False


@pytest.mark.parametrize(("diff", "sign"), [(5, 1), (-2, -1), (0, 0)])
def test_to_sign(diff, sign):
    assert to_sign(diff) == sign


def test_too_short_report_raises():
    with pytest.raises(IndexError):
        is_report_safe([1])


def test_count_safe():
    reports = [[7, 6, 4, 2, 1], [1, 2, 7, 8, 9], [1, 3, 2, 4, 5]]
    assert count_safe(reports, is_report_safe) == 1
    assert count_safe(reports, is_report_safe_with_dampener) == 2


def test_parse_reports():
    assert parse_reports("7 6 4\n1 2 7\n") == [[7, 6, 4], [1, 2, 7]]


def test_parse_reports_rejects_double_space():
    with pytest.raises(ValueError):
        parse_reports("1  2")


def test_read_reports_and_main(tmp_path, capsys):
    path = tmp_path / "data"
    path.write_text("7 6 4 2 1\n1 2 7 8 9\n1 3 2 4 5\n", encoding="utf-8")
    assert read_reports(path)[0] == [7, 6, 4, 2, 1]
    main([str(path)])
    out = capsys.readouterr().out
    assert "Part 1: 1" in out
    assert "Part 2: 2" in out