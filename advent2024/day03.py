"""Mull It Over: sum the valid multiplications in corrupted memory."""

from __future__ import annotations

import argparse
from pathlib import Path

from advent2024.parsing import _parse_int_literal

BEGIN_TOKEN = "mul("
END_TOKEN = ")"
SEPARATOR = ","
DISABLE = "don't()"
ENABLE = "do()"
_MAX_OFFSET = 3


def calculate(text: str) -> int:
    """Sum the products of every well-formed mul(a,b) instruction."""
    total = 0
    rest = text
    while True:
        index = rest.find(BEGIN_TOKEN)
        if index == -1:
            break
        rest = rest[index + len(BEGIN_TOKEN) :]
        comma = rest.find(SEPARATOR)
        if comma == -1:
            break
        if comma > _MAX_OFFSET:
            continue
        try:
            first = _parse_int_literal(rest[:comma])
        except ValueError:
            continue
        rest = rest[comma + 1 :]
        end = rest.find(END_TOKEN)
        if end > _MAX_OFFSET:
            continue
        if end == -1:
            break
        try:
            second = _parse_int_literal(rest[:end])
        except ValueError:
            continue
        rest = rest[end + 1 :]
        total += first * second
    return total


def calculate_with_conditional(text: str) -> int:
    """Like calculate, but ignore instructions between don't() and do()."""
    total = 0
    rest = text
    while True:
        index = rest.find(DISABLE)
        if index == -1:
            return total + calculate(rest)
        total += calculate(rest[:index])
        rest = rest[index + len(DISABLE) :]
        index = rest.find(ENABLE)
        if index == -1:
            return total
        rest = rest[index + len(ENABLE) :]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum multiplication instructions.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text(encoding="utf-8")
    print(f"The part 1 total is '{calculate(text)}'")
    print(f"The part 2 total is '{calculate_with_conditional(text)}'")