"""Resonant Collinearity: locate antinodes of antenna pairs."""

from __future__ import annotations

import argparse
from itertools import combinations
from typing import Sequence

from advent2024.grid import Coordinate, Grid, read_grid

BLANK = "."


def unique_antinodes(grid: Grid) -> set[Coordinate]:
    """Antinodes one pair distance beyond each antenna of a matching pair."""
    results: set[Coordinate] = set()
    for value, coordinates in grid.value_coordinates().items():
        if value == BLANK:
            continue
        for left, right in combinations(coordinates, 2):
            diff = left - right
            for antinode in (left + diff, right - diff):
                if grid.is_in_grid(antinode):
                    results.add(antinode)
    return results


def resonant_antinodes_in_range(
    grid: Grid, coordinates: Sequence[Coordinate]
) -> list[Coordinate]:
    """All grid points on the lines through each pair, stepping by the pair distance."""
    results: list[Coordinate] = []
    for left, right in combinations(coordinates, 2):
        diff = left - right
        point = left
        while grid.is_in_grid(point):
            results.append(point)
            point = point - diff
        point = right
        while grid.is_in_grid(point):
            results.append(point)
            point = point + diff
    return results


def unique_antinodes_resonant(grid: Grid) -> set[Coordinate]:
    results: set[Coordinate] = set()
    for value, coordinates in grid.value_coordinates().items():
        if value == BLANK:
            continue
        results.update(resonant_antinodes_in_range(grid, coordinates))
    return results


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find antenna antinodes.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    grid = read_grid(args.path)
    print(len(unique_antinodes(grid)))
    print(len(unique_antinodes_resonant(grid)))