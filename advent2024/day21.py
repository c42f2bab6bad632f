"""Keypad Conundrum: the fewest button presses through a chain of robots."""

from __future__ import annotations

import argparse
from typing import Iterable, Mapping, Sequence

from advent2024.grid import Coordinate
from advent2024.parsing import atoi, read_lines

NUMERIC_PAD = {
    "7": Coordinate(0, 0),
    "8": Coordinate(1, 0),
    "9": Coordinate(2, 0),
    "4": Coordinate(0, 1),
    "5": Coordinate(1, 1),
    "6": Coordinate(2, 1),
    "1": Coordinate(0, 2),
    "2": Coordinate(1, 2),
    "3": Coordinate(2, 2),
    "0": Coordinate(1, 3),
    "A": Coordinate(2, 3),
}

DIRECTIONAL_PAD = {
    "^": Coordinate(1, 0),
    "A": Coordinate(2, 0),
    "<": Coordinate(0, 1),
    "v": Coordinate(1, 1),
    ">": Coordinate(2, 1),
}

NUMERIC_START = Coordinate(2, 3)
NUMERIC_FORBIDDEN = Coordinate(0, 3)
DIRECTIONAL_FORBIDDEN = Coordinate(0, 0)
PART1_DEPTH = 2
PART2_DEPTH = 25

Memo = dict[tuple[str, int], int]


def _key(keypad: Mapping[str, Coordinate], char: str) -> Coordinate:
    try:
        return keypad[char]
    except KeyError:
        raise ValueError(f"rune not found {char}") from None


def _horizontal(dx: int) -> str:
    return (">" if dx > 0 else "<") * abs(dx)


def _vertical(dy: int) -> str:
    return ("^" if dy < 0 else "v") * abs(dy)


def generate_possible_routes(
    start: Coordinate, end: Coordinate, forbidden: Coordinate
) -> list[str]:
    """Button sequences moving straight across then down, or the other way round."""
    dif = end - start
    routes: list[str] = []
    if start + Coordinate(dif.x, 0) != forbidden:
        routes.append(_horizontal(dif.x) + _vertical(dif.y) + "A")
    if start + Coordinate(0, dif.y) != forbidden:
        route = _vertical(dif.y) + _horizontal(dif.x) + "A"
        if not routes or routes[-1] != route:
            routes.append(route)
    return routes


def generate_all_possible_routes(
    start: Coordinate,
    forbidden: Coordinate,
    code: str,
    keypad: Mapping[str, Coordinate],
) -> list[str]:
    """Every combination of route choices for typing the code on the keypad."""
    if not code:
        raise ValueError("empty code")
    routes = generate_possible_routes(start, _key(keypad, code[0]), forbidden)
    previous = code[0]
    for char in code[1:]:
        segments = generate_possible_routes(
            _key(keypad, previous), _key(keypad, char), forbidden
        )
        routes = [route + segment for segment in segments for route in routes]
        previous = char
    return routes


def best_for_route(route: str, depth: int, memo: Memo | None = None) -> int:
    """Fewest presses needed to type route through depth directional keypads."""
    if memo is None:
        memo = {}
    key = (route, depth)
    known = memo.get(key)
    if known is not None:
        return known
    if depth == 0:
        result = len(route)
    else:
        result = 0
        previous = "A"
        for step in route:
            routes = generate_possible_routes(
                _key(DIRECTIONAL_PAD, previous),
                _key(DIRECTIONAL_PAD, step),
                DIRECTIONAL_FORBIDDEN,
            )
            result += best_for_routes(routes, depth - 1, memo)
            previous = step
    memo[key] = result
    return result


def best_for_routes(routes: Sequence[str], depth: int, memo: Memo | None = None) -> int:
    """The lowest best_for_route over several candidate routes."""
    if not routes:
        raise ValueError("no routes to choose from")
    if memo is None:
        memo = {}
    return min(best_for_route(route, depth, memo) for route in routes)


def complexity(lines: Iterable[str], depth: int) -> int:
    """Sum over the codes of shortest press count times the code's number."""
    memo: Memo = {}
    total = 0
    for code in lines:
        routes = generate_all_possible_routes(
            NUMERIC_START, NUMERIC_FORBIDDEN, code, NUMERIC_PAD
        )
        total += best_for_routes(routes, depth, memo) * atoi(code[:-1])
    return total


def part1_for_lines(lines: Iterable[str]) -> int:
    return complexity(lines, PART1_DEPTH)


def part2_for_lines(lines: Iterable[str]) -> int:
    return complexity(lines, PART2_DEPTH)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Type codes through robot chains.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    codes = read_lines(args.path)
    print(part1_for_lines(codes))
    print(part2_for_lines(codes))