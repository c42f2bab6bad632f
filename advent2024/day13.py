"""Claw Contraption: the cheapest button presses to win each prize."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable

from advent2024.grid import Coordinate
from advent2024.parsing import _split_lines, atoi

A_COST = 3
B_COST = 1
PRIZE_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class ClawMachine:
    prize: Coordinate
    a_step: Coordinate
    b_step: Coordinate


def parse_button_line(line: str) -> Coordinate:
    """Parse 'Button A: X+94, Y+34' or 'Prize: X=8400, Y=5400'."""
    _, separator, values = line.partition(": ")
    if not separator:
        raise ValueError(f"invalid line {line!r}")
    parts = values.split(", ")
    if len(parts) < 2:
        raise ValueError(f"invalid line {line!r}")
    return Coordinate(atoi(parts[0][2:]), atoi(parts[1][2:]))


def parse_machines(text: str) -> list[ClawMachine]:
    """Parse blocks of button A, button B and prize lines separated by blank lines."""
    lines = _split_lines(text)
    machines = []
    for start in range(0, len(lines), 4):
        block = lines[start : start + 3]
        if len(block) != 3:
            raise ValueError("incomplete machine description")
        a_step, b_step, prize = (parse_button_line(line) for line in block)
        machines.append(ClawMachine(prize, a_step, b_step))
    return machines


def read_machines(path: str | Path) -> list[ClawMachine]:
    return parse_machines(Path(path).read_text(encoding="utf-8"))


def cost(machine: ClawMachine) -> int | None:
    """Tokens needed to win, or None if no whole number of presses reaches the prize."""
    a, b, end = machine.a_step, machine.b_step, machine.prize
    b_numerator = a.x * end.y - a.y * end.x
    denominator = b.y * a.x - b.x * a.y
    if denominator == 0 or a.x == 0:
        raise ValueError("not solvable with equation")
    if b_numerator % denominator != 0:
        return None
    b_presses = b_numerator // denominator
    a_numerator = end.x - b.x * b_presses
    if a_numerator % a.x != 0:
        return None
    a_presses = a_numerator // a.x
    return a_presses * A_COST + b_presses * B_COST


def total_cost(machines: Iterable[ClawMachine]) -> int:
    """Sum of the positive costs of all winnable machines."""
    total = 0
    for machine in machines:
        price = cost(machine)
        if price is not None and price > 0:
            total += price
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Win the claw machine prizes.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    machines = read_machines(args.path)
    print(total_cost(machines))
    offset = Coordinate(PRIZE_OFFSET, PRIZE_OFFSET)
    print(total_cost(replace(m, prize=m.prize + offset) for m in machines))