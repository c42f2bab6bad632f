"""RAM Run: escape a memory grid while bytes keep falling."""

from __future__ import annotations

import argparse
from bisect import bisect_left
from collections import deque
from pathlib import Path
from typing import Mapping

from advent2024.grid import Coordinate
from advent2024.parsing import _split_lines, atoi

Bricks = Mapping[Coordinate, int]


def _parse_brick(line: str) -> Coordinate:
    parts = line.split(",")
    if len(parts) < 2:
        raise ValueError(f"invalid brick {line!r}")
    return Coordinate(atoi(parts[0]), atoi(parts[1]))


def parse_bricks(text: str) -> dict[Coordinate, int]:
    """Map each falling byte's location to its 1-based arrival time."""
    return {
        _parse_brick(line): time for time, line in enumerate(_split_lines(text), start=1)
    }


def read_bricks(path: str | Path) -> dict[Coordinate, int]:
    return parse_bricks(Path(path).read_text(encoding="utf-8"))


def find_route(bricks: Bricks, bound: int, timestamp: int) -> int | None:
    """Shortest path length from the top left to the bottom right corner.

    Bytes that arrived at or before the timestamp block the way. None if
    no route exists.
    """
    target = Coordinate(bound - 1, bound - 1)
    best: dict[Coordinate, int] = {}
    queue = deque([(Coordinate(0, 0), 0)])
    while queue:
        coord, length = queue.popleft()
        path_length = length + 1
        for neighbour in coord.neighbours_within(bound, bound):
            arrival = bricks.get(neighbour)
            if arrival is not None and arrival <= timestamp:
                continue
            known = best.get(neighbour)
            if known is not None and known <= path_length:
                continue
            if neighbour == target:
                return path_length
            best[neighbour] = path_length
            queue.append((neighbour, path_length))
    return None


def first_blocking(bricks: Bricks, bound: int) -> Coordinate:
    """The location of the first byte after which no route remains."""
    time = bisect_left(
        range(len(bricks)), True, key=lambda t: find_route(bricks, bound, t) is None
    )
    for coord, arrival in bricks.items():
        if arrival == time:
            return coord
    raise LookupError("not found")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Escape the memory grid.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    bricks = read_bricks(args.path)
    print("Part 1:", find_route(bricks, 71, 1024))
    blocking = first_blocking(bricks, 71)
    print(f"{blocking.x},{blocking.y}")