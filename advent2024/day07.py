"""Bridge Repair: find calibrations that operators can make true."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from advent2024.parsing import _split_lines, atoi


@dataclass(frozen=True)
class Calibration:
    total: int
    numbers: tuple[int, ...]


def is_possible(expected: int, total: int, numbers: Sequence[int]) -> bool:
    """Whether + and * evaluated left to right can reach the expected total."""
    if not numbers:
        return expected == total
    if total > expected:
        return False
    head, rest = numbers[0], numbers[1:]
    return is_possible(expected, total * head, rest) or is_possible(
        expected, total + head, rest
    )


def is_possible_with_concat(expected: int, total: int, numbers: Sequence[int]) -> bool:
    """Like is_possible, also allowing digit concatenation."""
    if not numbers:
        return expected == total
    if total > expected:
        return False
    head, rest = numbers[0], numbers[1:]
    return (
        is_possible_with_concat(expected, total * head, rest)
        or is_possible_with_concat(expected, total + head, rest)
        or is_possible_with_concat(expected, int(f"{total}{head}"), rest)
    )


def _parse_line(line: str) -> Calibration:
    head, separator, tail = line.partition(":")
    if not separator:
        raise ValueError(f"missing ':' in {line!r}")
    return Calibration(atoi(head), tuple(atoi(part) for part in tail[1:].split(" ")))


def parse_calibrations(text: str) -> list[Calibration]:
    """Parse lines of the form 'total: n1 n2 ...'."""
    return [_parse_line(line) for line in _split_lines(text)]


def read_calibrations(path: str | Path) -> list[Calibration]:
    return parse_calibrations(Path(path).read_text(encoding="utf-8"))


def sum_valid(calibrations: Iterable[Calibration]) -> int:
    return sum(c.total for c in calibrations if is_possible(c.total, 0, c.numbers))


def sum_valid_with_concat(calibrations: Iterable[Calibration]) -> int:
    return sum(
        c.total for c in calibrations if is_possible_with_concat(c.total, 0, c.numbers)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Repair the bridge calibrations.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    calibrations = read_calibrations(args.path)
    print(sum_valid(calibrations))
    print(sum_valid_with_concat(calibrations))