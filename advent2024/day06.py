"""Guard Gallivant: follow a patrolling guard around obstacles."""

from __future__ import annotations

import argparse

from advent2024.grid import Coordinate, Grid, read_grid

NORTH = Coordinate(0, -1)
START = "^"
OBSTACLE = "#"
FREE = "."


def _find_start(grid: Grid) -> Coordinate:
    starts = grid.find_all(START)
    if len(starts) != 1:
        raise ValueError("invalid input: expected exactly one guard")
    return starts[0]


def determine_route(grid: Grid) -> set[Coordinate]:
    """Every location the guard visits before leaving the grid."""
    current = _find_start(grid)
    direction = NORTH
    visited = {current}
    while True:
        following = current + direction
        value = grid.get(following)
        if value is None:
            return visited
        if value == OBSTACLE:
            direction = direction.rotate_right()
        if value in (FREE, START):
            current = following
            visited.add(current)


def is_route_circular(grid: Grid) -> bool:
    """True if the guard ends up walking in a loop."""
    current = _find_start(grid)
    direction = NORTH
    passed = {(current, direction)}
    while True:
        following = current + direction
        value = grid.get(following)
        if value is None:
            return False
        if (following, direction) in passed:
            return True
        if value == OBSTACLE:
            direction = direction.rotate_right()
        if value in (FREE, START):
            current = following
        passed.add((current, direction))


def count_loop_positions(grid: Grid) -> int:
    """How many free cells would trap the guard in a loop if obstructed."""
    count = 0
    for location in grid.find_all(FREE):
        candidate = grid.copy()
        candidate.set(location, OBSTACLE)
        if is_route_circular(candidate):
            count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Follow the guard.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    grid = read_grid(args.path)
    print(len(determine_route(grid)))
    print(count_loop_positions(grid))