from collections import Counter

import pytest

from advent2024.day11 import blink, blink_once, count_after, parse_stones, read_stones

EXAMPLE = "125 17\n"


def test_parse_stones():
    assert parse_stones(EXAMPLE) == Counter({125: 1, 17: 1})


def test_parse_stones_counts_duplicates():
    assert parse_stones("3 3 4\n") == Counter({3: 2, 4: 1})


def test_parse_stones_rejects_garbage():
    with pytest.raises(ValueError):
        parse_stones("1 x\n")


def test_read_stones(tmp_path):
    path = tmp_path / "example"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert read_stones(path) == Counter({125: 1, 17: 1})


def test_example_25():
    assert count_after(parse_stones(EXAMPLE), 25) == 55312


def test_example_6():
    assert count_after(parse_stones(EXAMPLE), 6) == 22


def test_example_75():
    assert count_after(parse_stones(EXAMPLE), 75) == 65601038650482


def test_blink_even_digits():
    assert blink(3219) == [32, 19]


def test_blink_zero():
    assert blink(0) == [1]


def test_blink_odd_digits():
    assert blink(111) == [224664]


def test_blink_drops_leading_zeros():
    assert blink(1000) == [10, 0]


def test_blink_once():
    assert blink_once({125: 1, 17: 1}) == Counter({253000: 1, 1: 1, 7: 1})


def test_count_after_zero_iterations():
    assert count_after({5: 3}, 0) == 3