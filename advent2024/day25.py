"""Code Chronicle: count lock and key pairs that fit together."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from advent2024.parsing import read_lines

PINS = 5
MAX_HEIGHT = 5
SCHEMATIC_HEIGHT = 7
LOCK_TOP = "#####"


def _column_counts(lines: Sequence[str], character: str) -> list[int]:
    lengths = [0] * PINS
    for line in lines:
        for index, char in enumerate(line):
            if char == character:
                lengths[index] += 1
    return lengths


def parse_lock(lines: Sequence[str]) -> list[int]:
    """Pin heights of a lock schematic (filled top row)."""
    return _column_counts(lines[1:], "#")


def parse_key(lines: Sequence[str]) -> list[int]:
    """Heights of a key schematic (filled bottom row)."""
    return [6 - count for count in _column_counts(lines[:SCHEMATIC_HEIGHT], ".")]


def parse_schematics(lines: Sequence[str]) -> tuple[list[list[int]], list[list[int]]]:
    """Split schematics, each seven lines plus a separator, into locks and keys."""
    locks: list[list[int]] = []
    keys: list[list[int]] = []
    for start in range(0, len(lines), SCHEMATIC_HEIGHT + 1):
        if lines[start] == "":
            continue
        block = lines[start : start + SCHEMATIC_HEIGHT]
        if lines[start] == LOCK_TOP:
            locks.append(parse_lock(block))
        else:
            keys.append(parse_key(block))
    return locks, keys


def read_schematics(path: str | Path) -> tuple[list[list[int]], list[list[int]]]:
    return parse_schematics(read_lines(path))


def is_overlapping(lock: Sequence[int], key: Sequence[int]) -> bool:
    return any(pin + cut > MAX_HEIGHT for pin, cut in zip(lock, key))


def count_fitting(locks: Sequence[Sequence[int]], keys: Sequence[Sequence[int]]) -> int:
    """Number of lock and key pairs that do not overlap."""
    return sum(1 for lock in locks for key in keys if not is_overlapping(lock, key))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Fit keys into locks.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    print(count_fitting(*read_schematics(args.path)))