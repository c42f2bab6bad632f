import pytest

from advent2024.day10 import trailhead_ratings, trailhead_scores
from advent2024.grid import Grid, read_grid

EXAMPLE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


@pytest.fixture
def example(tmp_path):
    path = tmp_path / "example"
    path.write_text(EXAMPLE)
    return read_grid(path)


def test_example_part1(example):
    assert trailhead_scores(example) == 36


def test_example_part2(example):
    assert trailhead_ratings(example) == 81


def test_single_straight_trail():
    grid = Grid(["0123456789"])
    assert trailhead_scores(grid) == 1
    assert trailhead_ratings(grid) == 1


def test_no_trailheads():
    grid = Grid(["123", "456"])
    assert trailhead_scores(grid) == 0
    assert trailhead_ratings(grid) == 0


def test_rating_never_below_score(example):
    assert trailhead_ratings(example) >= trailhead_scores(example)