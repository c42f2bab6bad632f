import pytest

from advent2024.day19 import TowelPatterns, main, parse_towels, read_towels

EXAMPLE = """r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb
"""


def test_example_part1():
    patterns, designs = parse_towels(EXAMPLE)
    assert patterns.count_matching(designs) == 6


def test_example_single():
    patterns, _ = parse_towels(EXAMPLE)
    assert patterns.can_make("brgr") is True
    assert patterns.can_make("ubwu") is False


def test_simple():
    assert TowelPatterns(["s", "t"]).can_make("st") is True


def test_example_part2():
    patterns, designs = parse_towels(EXAMPLE)
    assert patterns.total_combinations(designs) == 16


@pytest.mark.parametrize(
    "design, ways",
    [("brwrr", 2), ("bggr", 1), ("gbbr", 4), ("rrbgbr", 6), ("ubwu", 0), ("bwurrg", 1)],
)
def test_combinations(design, ways):
    patterns, _ = parse_towels(EXAMPLE)
    assert patterns.combinations(design) == ways


def test_parse_empty():
    with pytest.raises(ValueError):
        parse_towels("")


def test_read_and_main(tmp_path, capsys):
    path = tmp_path / "example"
    path.write_text(EXAMPLE)
    patterns, designs = read_towels(path)
    assert len(designs) == 8
    assert patterns.patterns == ("r", "wr", "b", "g", "bwu", "rb", "gb", "br")
    main([str(path)])
    assert capsys.readouterr().out.splitlines() == ["part 1: 6", "Part 2: 16"]