import pytest

from advent2024.day06 import count_loop_positions, determine_route, is_route_circular
from advent2024.grid import Coordinate, Grid

EXAMPLE = Grid(
    [
        "....#.....",
        ".........#",
        "..........",
        "..#.......",
        ".......#..",
        "..........",
        ".#..^.....",
        "........#.",
        "#.........",
        "......#...",
    ]
)

BOX = Grid(
    [
        ".#..",
        ".^.#",
        "#...",
        "..#.",
    ]
)


def test_example_route_length():
    assert len(determine_route(EXAMPLE)) == 41


def test_example_loop_positions():
    assert count_loop_positions(EXAMPLE) == 6


def test_route_contains_start_and_stays_in_grid():
    route = determine_route(EXAMPLE)
    assert Coordinate(4, 6) in route
    assert all(EXAMPLE.is_in_grid(c) for c in route)
    assert all(EXAMPLE.get(c) != "#" for c in route)


def test_example_is_not_circular():
    assert is_route_circular(EXAMPLE) is False


def test_boxed_guard_is_circular():
    assert is_route_circular(BOX) is True


def test_count_does_not_modify_grid():
    grid = EXAMPLE.copy()
    count_loop_positions(grid)
    assert grid == EXAMPLE


def test_guard_walking_straight_out():
    grid = Grid(["...", ".^."])
    assert determine_route(grid) == {Coordinate(1, 1), Coordinate(1, 0)}


@pytest.mark.parametrize("rows", [["..."], ["^^."]])
def test_invalid_guard_count(rows):
    with pytest.raises(ValueError):
        determine_route(Grid(rows))
    with pytest.raises(ValueError):
        is_route_circular(Grid(rows))