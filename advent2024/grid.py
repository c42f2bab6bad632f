"""Character grids addressed by integer coordinates."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from advent2024.parsing import read_lines

EMPTY = "\x00"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point or vector on a grid; y grows downwards."""

    x: int
    y: int

    def __add__(self, other: object) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x - other.x, self.y - other.y)

    def rotate_left(self) -> Coordinate:
        return Coordinate(self.y, -self.x)

    def rotate_right(self) -> Coordinate:
        return Coordinate(-self.y, self.x)

    def dot(self, other: Coordinate) -> int:
        return self.x * other.x + self.y * other.y

    def cardinal_neighbours(self) -> list[Coordinate]:
        """The four orthogonal neighbours: left, right, up, down."""
        return [
            Coordinate(self.x - 1, self.y),
            Coordinate(self.x + 1, self.y),
            Coordinate(self.x, self.y - 1),
            Coordinate(self.x, self.y + 1),
        ]

    def neighbours_within(self, width: int, height: int) -> list[Coordinate]:
        """The cardinal neighbours inside a width by height area."""
        return [
            c for c in self.cardinal_neighbours() if 0 <= c.x < width and 0 <= c.y < height
        ]


@dataclass(frozen=True, slots=True)
class Adjacent:
    """A neighbouring location together with the character found there."""

    loc: Coordinate
    value: str


class Grid:
    """A rectangular grid of characters stored as rows of text."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[str] = ()) -> None:
        self.rows = list(rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Grid({self.rows!r})"

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def is_in_grid(self, coordinate: Coordinate) -> bool:
        return 0 <= coordinate.x < self.width and 0 <= coordinate.y < self.height

    def get(self, coordinate: Coordinate) -> str | None:
        """The character at a coordinate, or None outside the grid."""
        if not self.is_in_grid(coordinate):
            return None
        return self.rows[coordinate.y][coordinate.x]

    def set(self, coordinate: Coordinate, value: str) -> None:
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        if not self.is_in_grid(coordinate):
            raise IndexError(f"{coordinate} is outside the grid")
        row = self.rows[coordinate.y]
        self.rows[coordinate.y] = row[: coordinate.x] + value + row[coordinate.x + 1 :]

    def find_all(self, value: str) -> list[Coordinate]:
        """Every coordinate holding the character, in reading order."""
        return [
            Coordinate(x, y)
            for y, row in enumerate(self.rows)
            for x, char in enumerate(row)
            if char == value
        ]

    def copy(self) -> Grid:
        return Grid(self.rows)

    def empty_copy(self) -> Grid:
        """A grid of the same size filled with EMPTY."""
        return Grid(EMPTY * self.width for _ in self.rows)

    def value_coordinates(self) -> dict[str, list[Coordinate]]:
        """Map each character to the coordinates holding it, in reading order."""
        result: defaultdict[str, list[Coordinate]] = defaultdict(list)
        for y, row in enumerate(self.rows):
            for x, char in enumerate(row):
                result[char].append(Coordinate(x, y))
        return dict(result)

    def cardinal_adjacents(self, coordinate: Coordinate) -> list[Adjacent]:
        """The non-empty orthogonal neighbours that lie inside the grid."""
        return [
            Adjacent(neighbour, value)
            for neighbour in coordinate.cardinal_neighbours()
            if (value := self.get(neighbour)) is not None and value != EMPTY
        ]

    def coordinates(self) -> list[Coordinate]:
        """Every coordinate of the grid in reading order."""
        return [Coordinate(x, y) for y in range(self.height) for x in range(self.width)]

    def render(self) -> str:
        return "".join(f"{row}\n" for row in self.rows)


def read_grid(path: str | Path) -> Grid:
    """Read a grid from a text file, one row per line."""
    return Grid(read_lines(path))