"""Hoof It: score hiking trails that climb from 0 to 9."""

from __future__ import annotations

import argparse

from advent2024.grid import Coordinate, Grid, read_grid

TRAILHEAD = "0"
LEVELS = "123456789"


def _climb_from(grid: Grid, location: Coordinate, level: str) -> list[Coordinate]:
    return [adj.loc for adj in grid.cardinal_adjacents(location) if adj.value == level]


def trailhead_scores(grid: Grid) -> int:
    """Sum over trailheads of the number of distinct peaks they reach."""
    ends: dict[Coordinate, set[Coordinate]] = {
        head: {head} for head in grid.find_all(TRAILHEAD)
    }
    for level in LEVELS:
        following: dict[Coordinate, set[Coordinate]] = {}
        for end, starts in ends.items():
            for step in _climb_from(grid, end, level):
                following.setdefault(step, set()).update(starts)
        ends = following
    return sum(len(starts) for starts in ends.values())


def trailhead_ratings(grid: Grid) -> int:
    """Total number of distinct hiking trails from trailheads to peaks."""
    ends: dict[Coordinate, list[Coordinate]] = {
        head: [head] for head in grid.find_all(TRAILHEAD)
    }
    for level in LEVELS:
        following: dict[Coordinate, list[Coordinate]] = {}
        for end, starts in ends.items():
            for step in _climb_from(grid, end, level):
                following.setdefault(step, []).extend(starts)
        ends = following
    return sum(len(starts) for starts in ends.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score hiking trails.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    grid = read_grid(args.path)
    print(f"Part 1 {trailhead_scores(grid)}")
    print(f"Part 2 {trailhead_ratings(grid)}")