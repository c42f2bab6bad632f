"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from advent2024.grid import Coordinate
from advent2024.parsing import _split_lines

UP = Coordinate(0, -1)
DOWN = Coordinate(0, 1)
LEFT = Coordinate(-1, 0)
RIGHT = Coordinate(1, 0)
_STILL = Coordinate(0, 0)

WALL = "#"
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"
ROBOT = "@"
FREE = "."

_COMMANDS = {"<": LEFT, "^": UP, ">": RIGHT, "v": DOWN}

_Box = tuple[Coordinate, Coordinate]


@dataclass
class Warehouse:
    """Occupied locations by symbol, the robot's position and its commands."""

    locations: dict[Coordinate, str]
    robot: Coordinate
    commands: list[Coordinate] = field(default_factory=list)


def _parse_commands(lines: Iterable[str]) -> list[Coordinate]:
    return [_COMMANDS.get(char, _STILL) for line in lines for char in line]


def _map_lines(lines: Iterator[str]) -> Iterator[str]:
    for line in lines:
        if not line:
            return
        yield line


def parse_warehouse(text: str) -> Warehouse:
    """Parse the map, a blank line, then the movement commands."""
    lines = iter(_split_lines(text))
    locations: dict[Coordinate, str] = {}
    start = Coordinate(0, 0)
    for row, line in enumerate(_map_lines(lines)):
        for col, char in enumerate(line):
            if char == FREE:
                continue
            if char == ROBOT:
                start = Coordinate(col, row)
                continue
            if char not in (BOX, WALL):
                raise ValueError(f"unexpected symbol {char!r}")
            locations[Coordinate(col, row)] = char
    return Warehouse(locations, start, _parse_commands(lines))


def parse_wide_warehouse(text: str) -> Warehouse:
    """Parse the map with every tile doubled in width."""
    lines = iter(_split_lines(text))
    locations: dict[Coordinate, str] = {}
    start = Coordinate(0, 0)
    for row, line in enumerate(_map_lines(lines)):
        for index, char in enumerate(line):
            col = 2 * index
            if char == ROBOT:
                start = Coordinate(col, row)
            elif char == BOX:
                locations[Coordinate(col, row)] = BOX_LEFT
                locations[Coordinate(col + 1, row)] = BOX_RIGHT
            elif char == WALL:
                locations[Coordinate(col, row)] = WALL
                locations[Coordinate(col + 1, row)] = WALL
    return Warehouse(locations, start, _parse_commands(lines))


def read_warehouse(path: str | Path) -> Warehouse:
    return parse_warehouse(Path(path).read_text(encoding="utf-8"))


def read_wide_warehouse(path: str | Path) -> Warehouse:
    return parse_wide_warehouse(Path(path).read_text(encoding="utf-8"))


def _move_all(
    locations: dict[Coordinate, str], moving: list[Coordinate], direction: Coordinate
) -> None:
    for coord in reversed(moving[1:]):
        locations[coord + direction] = locations[coord]
    if len(moving) > 1:
        del locations[moving[1]]


def execute_commands(state: Warehouse) -> None:
    """Move the robot, pushing rows of boxes unless a wall blocks them."""
    for command in state.commands:
        moving = [state.robot]
        following = state.robot
        while True:
            following = following + command
            symbol = state.locations.get(following)
            if symbol is None:
                _move_all(state.locations, moving, command)
                state.robot = state.robot + command
                break
            if symbol == WALL:
                break
            moving.append(following)


def _box_at(locations: Mapping[Coordinate, str], coord: Coordinate) -> _Box:
    if locations.get(coord) == BOX_RIGHT:
        return coord + LEFT, coord
    return coord, coord + RIGHT


def _next_locations(box: _Box, direction: Coordinate) -> list[Coordinate]:
    if direction.y == 0:
        return [box[1] + direction] if direction.x == 1 else [box[0] + direction]
    return [box[0] + direction, box[1] + direction]


def _pushed_boxes(
    locations: Mapping[Coordinate, str], box: _Box, direction: Coordinate
) -> list[_Box] | None:
    """The boxes moved when pushing this one, or None if a wall blocks them."""
    touched = [box]
    for loc in _next_locations(box, direction):
        symbol = locations.get(loc)
        if symbol is None:
            continue
        if symbol == WALL:
            return None
        pushed = _pushed_boxes(locations, _box_at(locations, loc), direction)
        if pushed is None:
            return None
        touched.extend(pushed)
    return touched


def _move_boxes(
    locations: dict[Coordinate, str], boxes: list[_Box], direction: Coordinate
) -> None:
    for left, right in boxes:
        locations.pop(left, None)
        locations.pop(right, None)
    for left, right in boxes:
        locations[left + direction] = BOX_LEFT
        locations[right + direction] = BOX_RIGHT


def execute_wide_commands(state: Warehouse) -> None:
    """Move the robot through a wide warehouse where boxes span two tiles."""
    for command in state.commands:
        following = state.robot + command
        symbol = state.locations.get(following)
        if symbol is None:
            state.robot = following
            continue
        if symbol == WALL:
            continue
        boxes = _pushed_boxes(state.locations, _box_at(state.locations, following), command)
        if boxes is not None:
            _move_boxes(state.locations, boxes, command)
            state.robot = following


def gps_sum(locations: Mapping[Coordinate, str]) -> int:
    return sum(100 * c.y + c.x for c, symbol in locations.items() if symbol == BOX)


def wide_gps_sum(locations: Mapping[Coordinate, str]) -> int:
    return sum(100 * c.y + c.x for c, symbol in locations.items() if symbol == BOX_LEFT)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Push boxes around the warehouse.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    state = read_warehouse(args.path)
    execute_commands(state)
    print(gps_sum(state.locations))
    wide = read_wide_warehouse(args.path)
    execute_wide_commands(wide)
    print(wide_gps_sum(wide.locations))