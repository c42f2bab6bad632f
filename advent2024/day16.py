"""Reindeer Maze: lowest score through a maze and the tiles on best paths."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass, field

from advent2024.grid import Coordinate, Grid, read_grid

ROTATION_COST = 1000
STEP_COST = 1
WALL = "#"
START = "S"
END = "E"
EAST = Coordinate(1, 0)

_State = tuple[Coordinate, Coordinate]


@dataclass
class _Best:
    score: int
    previous: list[_State] = field(default_factory=list)


def _next_steps(grid: Grid, state: _State) -> dict[_State, int]:
    coord, direction = state
    steps = {
        (coord, direction.rotate_right()): ROTATION_COST,
        (coord, direction.rotate_left()): ROTATION_COST,
    }
    forward = coord + direction
    if grid.get(forward) != WALL:
        steps[(forward, direction)] = STEP_COST
    return steps


def _explore(grid: Grid, start: _State) -> dict[_State, _Best]:
    best = {start: _Best(1)}
    queue = deque([(start, 1)])
    while queue:
        state, score = queue.popleft()
        for step, added in _next_steps(grid, state).items():
            following = score + added
            current = best.get(step)
            if current is None or current.score > following:
                best[step] = _Best(following, [state])
                queue.append((step, following))
            elif current.score == following:
                current.previous.append(state)
    return best


def _tiles_on_best_paths(end: _State, best: dict[_State, _Best]) -> int:
    coordinates: set[Coordinate] = set()
    visited: set[_State] = set()
    queue = deque([end])
    while queue:
        state = queue.popleft()
        if state in visited:
            continue
        visited.add(state)
        coordinates.add(state[0])
        queue.extend(best[state].previous)
    return len(coordinates)


def min_score(grid: Grid) -> tuple[int, int]:
    """The lowest score from S to E and the number of tiles on a best path."""
    starts = grid.find_all(START)
    if len(starts) != 1:
        raise ValueError("invalid input: expected exactly one start")
    ends = grid.find_all(END)
    if not ends:
        raise ValueError("invalid input: no end")
    end = ends[0]
    best = _explore(grid, (starts[0], EAST))
    finishing: _State | None = None
    for state, entry in best.items():
        if state[0] == end and (finishing is None or best[finishing].score > entry.score):
            finishing = state
    if finishing is None:
        raise ValueError("the end cannot be reached")
    return best[finishing].score - 1, _tiles_on_best_paths(finishing, best)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Walk the reindeer maze.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    print(min_score(read_grid(args.path)))