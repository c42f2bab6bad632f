"""Linen Layout: build towel designs from available patterns."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from advent2024.parsing import _split_lines


@dataclass
class TowelPatterns:
    """The available stripe patterns, with memoised results per design."""

    patterns: Sequence[str]
    _makeable: dict[str, bool] = field(default_factory=dict, init=False, repr=False, compare=False)
    _counts: dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.patterns = tuple(self.patterns)

    def can_make(self, design: str) -> bool:
        known = self._makeable.get(design)
        if known is not None:
            return known
        result = any(
            design.startswith(pattern)
            and (len(pattern) == len(design) or self.can_make(design[len(pattern) :]))
            for pattern in self.patterns
        )
        self._makeable[design] = result
        return result

    def combinations(self, design: str) -> int:
        """Number of distinct ways to build the design."""
        known = self._counts.get(design)
        if known is not None:
            return known
        options = 0
        for pattern in self.patterns:
            if not design.startswith(pattern):
                continue
            if len(pattern) == len(design):
                options += 1
            options += self.combinations(design[len(pattern) :])
        self._counts[design] = options
        return options

    def count_matching(self, designs: Iterable[str]) -> int:
        return sum(1 for design in designs if self.can_make(design))

    def total_combinations(self, designs: Iterable[str]) -> int:
        return sum(self.combinations(design) for design in designs)


def parse_towels(text: str) -> tuple[TowelPatterns, list[str]]:
    """Parse the pattern line, a blank line, then one design per line."""
    lines = _split_lines(text)
    if not lines:
        raise ValueError("no towel patterns given")
    return TowelPatterns(lines[0].split(", ")), lines[2:]


def read_towels(path: str | Path) -> tuple[TowelPatterns, list[str]]:
    return parse_towels(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Arrange the towels.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    patterns, designs = read_towels(args.path)
    print("part 1:", patterns.count_matching(designs))
    print("Part 2:", patterns.total_combinations(designs))