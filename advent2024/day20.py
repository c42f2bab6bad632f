"""Race Condition: find shortcuts through the walls of a racetrack."""

from __future__ import annotations

import argparse
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence

from advent2024.grid import Coordinate, Grid, read_grid

WALL = "#"
START = "S"
END = "E"
SHORT_CHEAT = 2
LONG_CHEAT = 20
WORTHWHILE_SAVING = 100


@dataclass(frozen=True)
class Precalculations:
    """Start and end of the track with distances from each of them."""

    begin: Coordinate
    end: Coordinate
    from_start: dict[Coordinate, int]
    from_end: dict[Coordinate, int]


@dataclass(frozen=True)
class Cheat:
    """A shortcut from one track location to another and the time it saves."""

    begin: Coordinate
    end: Coordinate
    score: int


def calculate_distances(start: Coordinate, grid: Grid) -> dict[Coordinate, int]:
    """Shortest walking distance from start to every reachable non-wall cell."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        following = distances[current] + 1
        for adjacent in grid.cardinal_adjacents(current):
            if adjacent.value == WALL:
                continue
            known = distances.get(adjacent.loc)
            if known is None or known > following:
                distances[adjacent.loc] = following
                queue.append(adjacent.loc)
    return distances


def _single(grid: Grid, symbol: str) -> Coordinate:
    found = grid.find_all(symbol)
    if not found:
        raise ValueError(f"invalid input: no {symbol!r} on the track")
    return found[0]


def calculate_base(grid: Grid) -> Precalculations:
    begin = _single(grid, START)
    end = _single(grid, END)
    return Precalculations(
        begin=begin,
        end=end,
        from_start=calculate_distances(begin, grid),
        from_end=calculate_distances(end, grid),
    )


def possible_moves(length: int) -> list[Coordinate]:
    """Every offset at a Manhattan distance from 2 up to length."""
    moves: list[Coordinate] = []
    for distance in range(2, length + 1):
        for x in range(-distance + 1, distance):
            rest = distance - abs(x)
            moves.append(Coordinate(x, rest))
            moves.append(Coordinate(x, -rest))
        moves.append(Coordinate(distance, 0))
        moves.append(Coordinate(-distance, 0))
    return moves


def _find_with_moves(calcs: Precalculations, moves: Sequence[Coordinate]) -> list[Cheat]:
    base = calcs.from_start[calcs.end]
    cheats: list[Cheat] = []
    for coordinate, from_start in calcs.from_start.items():
        for move in moves:
            target = coordinate + move
            from_end = calcs.from_end.get(target)
            if from_end is None:
                continue
            length = from_start + from_end + abs(move.x) + abs(move.y)
            if base > length:
                cheats.append(Cheat(coordinate, target, base - length))
    return cheats


def find_cheats(calcs: Precalculations) -> list[Cheat]:
    """Cheats that pass through walls for two picoseconds and save time."""
    return _find_with_moves(calcs, possible_moves(SHORT_CHEAT))


def find_long_cheats(calcs: Precalculations) -> list[Cheat]:
    """Cheats lasting up to twenty picoseconds that save time."""
    return _find_with_moves(calcs, possible_moves(LONG_CHEAT))


def score(cheats: Iterable[Cheat]) -> int:
    """Number of cheats saving at least a hundred picoseconds."""
    return sum(1 for cheat in cheats if cheat.score >= WORTHWHILE_SAVING)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find racetrack cheats.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    base = calculate_base(read_grid(args.path))
    print(score(find_cheats(base)))
    print(score(find_long_cheats(base)))