from collections import Counter

import pytest

from advent2024.day20 import (
    Cheat,
    calculate_base,
    calculate_distances,
    find_cheats,
    find_long_cheats,
    main,
    possible_moves,
    score,
)
from advent2024.grid import Coordinate, Grid

EXAMPLE = """\
###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


@pytest.fixture
def grid():
    return Grid(EXAMPLE.splitlines())


def test_base_distance(grid):
    base = calculate_base(grid)
    assert base.begin == Coordinate(1, 3)
    assert base.end == Coordinate(5, 7)
    assert base.from_start[base.end] == 84
    assert base.from_end[base.begin] == 84


def test_distances_start_at_zero(grid):
    distances = calculate_distances(Coordinate(1, 3), grid)
    assert distances[Coordinate(1, 3)] == 0
    assert distances[Coordinate(1, 2)] == 1
    assert Coordinate(0, 0) not in distances


def test_example_part1():
    cheats = find_cheats(calculate_base(Grid(EXAMPLE.splitlines())))
    counts = Counter(cheat.score for cheat in cheats)
    assert counts == {
        2: 14,
        4: 14,
        6: 2,
        8: 4,
        10: 2,
        12: 3,
        20: 1,
        36: 1,
        38: 1,
        40: 1,
        64: 1,
    }


def test_example_part2(grid):
    cheats = find_long_cheats(calculate_base(grid))
    counts = Counter(cheat.score for cheat in cheats if cheat.score >= 50)
    assert counts == {
        50: 32,
        52: 31,
        54: 29,
        56: 39,
        58: 25,
        60: 23,
        62: 20,
        64: 19,
        66: 12,
        68: 14,
        70: 12,
        72: 22,
        74: 4,
        76: 3,
    }


def test_generation_of_short_moves():
    moves = possible_moves(2)
    assert set(moves) == {
        Coordinate(-1, 1),
        Coordinate(-1, -1),
        Coordinate(0, 2),
        Coordinate(0, -2),
        Coordinate(1, 1),
        Coordinate(1, -1),
        Coordinate(2, 0),
        Coordinate(-2, 0),
    }
    assert len(moves) == 8


def test_long_moves_are_unique_and_bounded():
    moves = possible_moves(20)
    assert len(moves) == 836
    assert len(set(moves)) == 836
    assert all(2 <= abs(m.x) + abs(m.y) <= 20 for m in moves)


def test_score_counts_large_savings():
    origin = Coordinate(0, 0)
    cheats = [Cheat(origin, origin, 99), Cheat(origin, origin, 100), Cheat(origin, origin, 150)]
    assert score(cheats) == 2


def test_missing_start_raises():
    with pytest.raises(ValueError):
        calculate_base(Grid(["#E.#"]))


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "data"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out == "0\n0\n"