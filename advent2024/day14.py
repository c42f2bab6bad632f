"""Restroom Redoubt: predict where patrolling robots end up."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from math import prod
from pathlib import Path
from typing import Iterable, Sequence

from advent2024.grid import Coordinate
from advent2024.parsing import _split_lines, atoi

QUADRANT_COUNT = 5


@dataclass(frozen=True)
class Room:
    width: int
    length: int

    @property
    def middle_x(self) -> int:
        return self.width // 2

    @property
    def middle_y(self) -> int:
        return self.length // 2


@dataclass(frozen=True)
class Robot:
    start: Coordinate
    velocity: Coordinate

    def position_after(self, time: int, room: Room) -> Coordinate:
        """Location after the given seconds, wrapping around the room edges."""
        return Coordinate(
            (time * self.velocity.x + self.start.x) % room.width,
            (time * self.velocity.y + self.start.y) % room.length,
        )


def _parse_tuple(text: str) -> Coordinate:
    x, separator, y = text.partition(",")
    if not separator:
        raise ValueError(f"invalid pair {text!r}")
    return Coordinate(atoi(x), atoi(y))


def _parse_robot(line: str) -> Robot:
    position, separator, velocity = line.partition(" ")
    if not separator or not position.startswith("p=") or not velocity.startswith("v="):
        raise ValueError(f"invalid robot {line!r}")
    return Robot(_parse_tuple(position[2:]), _parse_tuple(velocity[2:]))


def parse_robots(text: str) -> list[Robot]:
    """Parse lines of the form 'p=x,y v=dx,dy'."""
    return [_parse_robot(line) for line in _split_lines(text)]


def read_robots(path: str | Path) -> list[Robot]:
    return parse_robots(Path(path).read_text(encoding="utf-8"))


def locations_after(time: int, room: Room, robots: Iterable[Robot]) -> list[Coordinate]:
    return [robot.position_after(time, room) for robot in robots]


def quadrant(location: Coordinate, room: Room) -> int:
    """0 on a middle line, otherwise 1 to 4: top left, top right, bottom left, bottom right."""
    if location.x == room.middle_x or location.y == room.middle_y:
        return 0
    if location.y < room.middle_y:
        return 1 if location.x < room.middle_x else 2
    return 3 if location.x < room.middle_x else 4


def count_quadrants(locations: Iterable[Coordinate], room: Room) -> list[int]:
    counts = [0] * QUADRANT_COUNT
    for location in locations:
        counts[quadrant(location, room)] += 1
    return counts


def safety_factor(counts: Sequence[int]) -> int:
    """Product of the robot counts in the four quadrants."""
    return prod(counts[1:])


def render_locations(locations: Iterable[Coordinate], room: Room) -> str:
    """The room as text: 'O' where a robot stands, a space elsewhere."""
    occupied = set(locations)
    return "".join(
        "".join("O" if Coordinate(x, y) in occupied else " " for x in range(room.width)) + "\n"
        for y in range(room.length)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Predict the robots.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    robots = read_robots(args.path)
    room = Room(101, 103)
    print(safety_factor(count_quadrants(locations_after(100, room, robots), room)))
    for time in range(99, 100000, room.width):
        print()
        print("-------", time, "-----")
        print(render_locations(locations_after(time, room, robots), room))