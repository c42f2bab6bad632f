"""Garden Groups: price the fences around garden regions."""

from __future__ import annotations

import argparse
from collections import Counter
from dataclasses import dataclass

from advent2024.grid import Coordinate, Grid, read_grid

_FLOOD_DIRECTIONS = (Coordinate(0, -1), Coordinate(-1, 0))
_UNASSIGNED = 0


@dataclass
class Region:
    """A connected area of equal plants."""

    symbol: str
    size: int = 0
    circumference: int = 0


def _id_at(ids: list[list[int]], coordinate: Coordinate) -> int:
    if 0 <= coordinate.y < len(ids) and 0 <= coordinate.x < len(ids[0]):
        return ids[coordinate.y][coordinate.x]
    return _UNASSIGNED


def flood_regions(grid: Grid) -> tuple[dict[int, Region], list[list[int]]]:
    """Split the grid into regions; return them by id, and each cell's region id."""
    regions: dict[int, Region] = {}
    ids = [[_UNASSIGNED] * grid.width for _ in range(grid.height)]
    next_id = 1
    for coord in grid.coordinates():
        symbol = grid.get(coord)
        for direction in _FLOOD_DIRECTIONS:
            flood = _id_at(ids, coord + direction)
            region = regions.get(flood)
            if region is None or region.symbol != symbol:
                continue
            edges = 2
            side = _id_at(ids, coord + Coordinate(direction.y, direction.x))
            if side == flood:
                edges = 0
            else:
                other = regions.get(side)
                if other is not None and other.symbol == symbol:
                    edges = 0
                    for row in ids:
                        row[:] = [flood if cell == side else cell for cell in row]
                    region.size += other.size
                    region.circumference += other.circumference
                    del regions[side]
            region.size += 1
            region.circumference += edges
            ids[coord.y][coord.x] = flood
            break
        else:
            regions[next_id] = Region(symbol, 1, 4)
            ids[coord.y][coord.x] = next_id
            next_id += 1
    return regions, ids


def part1(grid: Grid) -> int:
    """Sum of area times perimeter over all regions."""
    regions, _ = flood_regions(grid)
    return sum(region.size * region.circumference for region in regions.values())


def _count_sides(ids: list[list[int]]) -> Counter[int]:
    sides: Counter[int] = Counter()
    height = len(ids)
    width = len(ids[0])
    for dy in (-1, 1):
        for y in range(height):
            current = _UNASSIGNED
            for x in range(width):
                edge = ids[y][x]
                if _id_at(ids, Coordinate(x, y + dy)) == edge:
                    edge = _UNASSIGNED
                if edge != current:
                    current = edge
                    sides[current] += 1
    for dx in (1, -1):
        for x in range(width):
            current = _UNASSIGNED
            for y in range(height):
                edge = ids[y][x]
                if _id_at(ids, Coordinate(x + dx, y)) == edge:
                    edge = _UNASSIGNED
                if edge != current:
                    current = edge
                    sides[current] += 1
    return sides


def part2(grid: Grid) -> int:
    """Sum of area times number of straight fence sides over all regions."""
    regions, ids = flood_regions(grid)
    sides = _count_sides(ids)
    return sum(region.size * sides[region_id] for region_id, region in regions.items())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Price the garden fences.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    grid = read_grid(args.path)
    print(part1(grid))
    print(part2(grid))