"""Historian Hysteria: compare two lists of location ids."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from advent2024.parsing import _parse_int_literal

_SEPARATOR = "   "


@dataclass
class LocationEntries:
    """The left and right location lists."""

    left: list[int] = field(default_factory=list)
    right: list[int] = field(default_factory=list)

    def add(self, left: int, right: int) -> None:
        self.left.append(left)
        self.right.append(right)

    def distance(self) -> int:
        """Sum of distances between the lists paired in sorted order."""
        return sum(abs(a - b) for a, b in zip(sorted(self.left), sorted(self.right)))

    def similarity(self) -> int:
        """Sum of each left value times how often it occurs on the right."""
        left_counts = Counter(self.left)
        right_counts = Counter(self.right)
        return sum(count * value * right_counts[value] for value, count in left_counts.items())


def _parse_entry(part: str) -> int:
    try:
        return _parse_int_literal(part)
    except ValueError as exc:
        raise ValueError(f"Can not parse int '{part}'") from exc


def read_from_string(text: str) -> LocationEntries:
    """Parse lines of two numbers separated by three spaces."""
    entries = LocationEntries()
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(_SEPARATOR)
        if len(parts) != 2:
            raise ValueError(f"Invalid input line='{line}' {parts}")
        entries.add(_parse_entry(parts[0]), _parse_entry(parts[1]))
    return entries


def read_from_file(path: str | Path) -> LocationEntries:
    return read_from_string(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two location lists.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    entries = read_from_file(args.path)
    print(f"The part 1 result is '{entries.distance()}'")
    print(f"The part 2 result is '{entries.similarity()}'")