import pytest

from advent2024.day12 import flood_regions, part1, part2
from advent2024.grid import Grid, read_grid

EXAMPLE = [
    "RRRRIICCFF",
    "RRRRIICCCF",
    "VVRRRCCFFF",
    "VVRCCCJFFF",
    "VVVVCJJCFE",
    "VVIVCCJJEE",
    "VVIIICJJEE",
    "MIIIIIJJEE",
    "MIIISIJEEE",
    "MMMISSJEEE",
]

SMALL = ["AAAA", "BBCD", "BBCC", "EEEC"]


def test_part2_example():
    assert part2(Grid(EXAMPLE)) == 1206


def test_part1_example():
    assert part1(Grid(EXAMPLE)) == 1930


def test_example_from_file(tmp_path):
    path = tmp_path / "example"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert part2(read_grid(path)) == 1206


def test_small_example():
    assert part1(Grid(SMALL)) == 140
    assert part2(Grid(SMALL)) == 80


@pytest.mark.parametrize(
    "rows, expected",
    [(["A"], 4), (["AA", "BB"], 16), (["AB", "BB"], 22)],
)
def test_part2_simple(rows, expected):
    assert part2(Grid(rows)) == expected


@pytest.mark.parametrize(
    "rows, expected",
    [(["A"], 4), (["AA", "BB"], 24), (["AB", "BB"], 28)],
)
def test_part1_simple(rows, expected):
    assert part1(Grid(rows)) == expected


def test_flood_regions_merges_same_symbol():
    regions, ids = flood_regions(Grid(["AB", "BB"]))
    sizes = sorted((r.symbol, r.size, r.circumference) for r in regions.values())
    assert sizes == [("A", 1, 4), ("B", 3, 8)]
    assert ids[0][1] == ids[1][0] == ids[1][1]
    assert ids[0][0] != ids[1][1]