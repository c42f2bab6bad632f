import pytest

from advent2024.day21 import (
    DIRECTIONAL_FORBIDDEN,
    NUMERIC_FORBIDDEN,
    NUMERIC_PAD,
    NUMERIC_START,
    best_for_route,
    best_for_routes,
    complexity,
    generate_all_possible_routes,
    generate_possible_routes,
    main,
    part1_for_lines,
    part2_for_lines,
)
from advent2024.grid import Coordinate

EXAMPLE = ["029A", "980A", "179A", "456A", "379A"]


def test_route_avoids_forbidden_corner():
    routes = generate_possible_routes(Coordinate(2, 0), Coordinate(0, 1), DIRECTIONAL_FORBIDDEN)
    assert routes == ["v<<A"]


def test_route_to_same_key_is_single_press():
    routes = generate_possible_routes(Coordinate(1, 1), Coordinate(1, 1), DIRECTIONAL_FORBIDDEN)
    assert routes == ["A"]


def test_route_offers_both_orders():
    routes = generate_possible_routes(Coordinate(2, 0), Coordinate(1, 1), DIRECTIONAL_FORBIDDEN)
    assert routes == ["<vA", "v<A"]


def test_numeric_route_avoids_gap():
    routes = generate_possible_routes(NUMERIC_START, NUMERIC_PAD["7"], NUMERIC_FORBIDDEN)
    assert routes == ["^^^<<A"]


def test_all_routes_for_code():
    routes = generate_all_possible_routes(NUMERIC_START, NUMERIC_FORBIDDEN, "029A", NUMERIC_PAD)
    assert routes == ["<A^A>^^AvvvA", "<A^A^^>AvvvA"]


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        generate_all_possible_routes(NUMERIC_START, NUMERIC_FORBIDDEN, "0B", NUMERIC_PAD)


def test_simple_one_level():
    assert best_for_route("A", 3, {}) == 1


def test_depth_zero_is_length():
    assert best_for_route("<A^A", 0) == 4


def test_v_press_one_level():
    assert best_for_route("vA", 1, {}) == 6


def test_v_press_two_levels():
    assert best_for_route("vA", 2, {}) == 16


def test_best_of_routes_takes_minimum():
    assert best_for_routes(["<A^A>^^AvvvA", "<A^A^^>AvvvA"], 2) == 68


def test_no_routes_raises():
    with pytest.raises(ValueError):
        best_for_routes([], 1)


def test_part1_simple_example():
    assert part1_for_lines(["029A"]) == 1972


def test_part1_example():
    assert part1_for_lines(EXAMPLE) == 126384
    assert complexity(EXAMPLE, 2) == 126384


def test_part2_example():
    assert part2_for_lines(EXAMPLE) == 154115708116294


def test_main(tmp_path, capsys):
    path = tmp_path / "data"
    path.write_text("\n".join(EXAMPLE) + "\n")
    main([str(path)])
    assert capsys.readouterr().out == "126384\n154115708116294\n"