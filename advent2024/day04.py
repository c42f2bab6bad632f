"""Ceres Search: count XMAS words and X-shaped MAS crosses."""

from __future__ import annotations

import argparse
from typing import Iterable

from advent2024.grid import Coordinate, Grid, read_grid

WORD = "XMAS"

NW = Coordinate(-1, -1)
NE = Coordinate(1, -1)
SW = Coordinate(-1, 1)
SE = Coordinate(1, 1)

_DIRECTIONS = tuple(
    Coordinate(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def _scaled(direction: Coordinate, factor: int) -> Coordinate:
    return Coordinate(direction.x * factor, direction.y * factor)


def count_xmas(grid: Grid) -> int:
    """Count XMAS written in a straight line in any of the eight directions."""
    count = 0
    for start in grid.find_all(WORD[0]):
        for direction in _DIRECTIONS:
            if grid.get(start + _scaled(direction, len(WORD) - 1)) is None:
                continue
            word = "".join(grid.get(start + _scaled(direction, i)) for i in range(len(WORD)))
            if word == WORD:
                count += 1
    return count


def _is_ms(grid: Grid, location: Coordinate, directions: Iterable[Coordinate]) -> bool:
    others = {grid.get(location + direction) for direction in directions}
    return "M" in others and "S" in others


def count_x_mas(grid: Grid) -> int:
    """Count A cells whose two diagonals each read MAS in either direction."""
    return sum(
        1
        for location in grid.find_all("A")
        if _is_ms(grid, location, (NE, SW)) and _is_ms(grid, location, (NW, SE))
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search the word grid.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    grid = read_grid(args.path)
    print(f"Part 1: {count_xmas(grid)}")
    print(f"Part 2: {count_x_mas(grid)}")