"""Red-Nosed Reports: check level reports for safety."""

from __future__ import annotations

import argparse
from itertools import pairwise
from pathlib import Path
from typing import Callable, Iterable, Sequence

from advent2024.parsing import _parse_int_literal, _split_lines

MAX_DIFFERENCE = 3


def _parse_report(line: str) -> list[int]:
    return [_parse_int_literal(part) for part in line.split(" ")]


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report per line, levels separated by single spaces."""
    return [_parse_report(line) for line in _split_lines(text)]


def read_reports(path: str | Path) -> list[list[int]]:
    return parse_reports(Path(path).read_text(encoding="utf-8"))


def to_sign(diff: int) -> int:
    return (diff > 0) - (diff < 0)


def is_safe_step(previous: int, current: int, sign: int) -> bool:
    """A step is safe if it changes by 1 to 3 in the expected direction."""
    diff = previous - current
    if abs(diff) > MAX_DIFFERENCE:
        return False
    new_sign = to_sign(diff)
    return new_sign != 0 and new_sign == sign


def is_report_safe(report: Sequence[int]) -> bool:
    sign = to_sign(report[0] - report[1])
    return all(is_safe_step(prev, cur, sign) for prev, cur in pairwise(report))


def is_report_safe_with_dampener(report: Sequence[int]) -> bool:
    """Safety when a single bad level may be removed."""
    levels = list(report)
    sign = to_sign(levels[0] - levels[1])
    for index, (previous, current) in enumerate(pairwise(levels)):
        if is_safe_step(previous, current, sign):
            continue
        if index == 0:
            return is_report_safe(levels[1:]) or is_report_safe([levels[0], *levels[2:]])
        if index == len(levels) - 2:
            return True
        return (
            is_report_safe(levels[: index - 1] + levels[index:])
            or is_report_safe(levels[:index] + levels[index + 1 :])
            or is_report_safe(levels[: index + 1] + levels[index + 2 :])
        )
    return True


def count_safe(
    reports: Iterable[Sequence[int]], check: Callable[[Sequence[int]], bool]
) -> int:
    return sum(1 for report in reports if check(report))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count safe reports.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    reports = read_reports(args.path)
    print(f"Part 1: {count_safe(reports, is_report_safe)}")
    print(f"Part 2: {count_safe(reports, is_report_safe_with_dampener)}")