"""Plutonian Pebbles: count stones that split and multiply as you blink."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Mapping

from advent2024.parsing import atoi

MULTIPLIER = 2024


def parse_stones(text: str) -> Counter[int]:
    """Count the stones in a line of space separated numbers."""
    return Counter(atoi(part) for part in text.rstrip("\n").split(" "))


def read_stones(path: str | Path) -> Counter[int]:
    return parse_stones(Path(path).read_text(encoding="utf-8"))


def blink(stone: int) -> list[int]:
    """The stones a single stone turns into after one blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        left, right = divmod(stone, 10 ** (len(digits) // 2))
        return [left, right]
    return [MULTIPLIER * stone]


def blink_once(counts: Mapping[int, int]) -> Counter[int]:
    """Stone counts after one blink, given counts per stone value."""
    result: Counter[int] = Counter()
    for stone, amount in counts.items():
        for produced in blink(stone):
            result[produced] += amount
    return result


def count_after(counts: Mapping[int, int], iterations: int) -> int:
    """Total number of stones after blinking the given number of times."""
    current: Mapping[int, int] = counts
    for _ in range(iterations):
        current = blink_once(current)
    return sum(current.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Blink at the stones.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    stones = read_stones(args.path)
    print(count_after(stones, 25))
    print(count_after(stones, 75))