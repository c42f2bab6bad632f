"""Print Queue: check page updates against ordering rules."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence

from advent2024.parsing import _parse_int_literal, _split_lines

Rules = Mapping[int, Sequence[int]]


@dataclass
class PrintQueue:
    """Ordering rules (page -> pages that must come after it) and updates."""

    rules: dict[int, list[int]] = field(default_factory=dict)
    updates: list[list[int]] = field(default_factory=list)


def _parse_number(part: str, text: str) -> int:
    try:
        return _parse_int_literal(part)
    except ValueError as exc:
        raise ValueError(f"Fail to parse {text}") from exc


def parse_rule(text: str) -> tuple[int, int]:
    """Parse a rule 'before|after' into a (before, after) pair."""
    before, separator, after = text.partition("|")
    if not separator:
        raise ValueError(f"Fail to parse {text}: no '|' found")
    return _parse_number(before, text), _parse_number(after, text)


def parse_print_queue(text: str) -> PrintQueue:
    """Parse rules, a blank line, then comma separated updates."""
    queue = PrintQueue()
    lines = iter(_split_lines(text))
    for line in lines:
        if not line:
            break
        before, after = parse_rule(line)
        queue.rules.setdefault(before, []).append(after)
    for line in lines:
        queue.updates.append([_parse_int_literal(part) for part in line.split(",")])
    return queue


def load(path: str | Path) -> PrintQueue:
    return parse_print_queue(Path(path).read_text(encoding="utf-8"))


def satisfies(update: Sequence[int], rules: Rules) -> bool:
    """True if no page appears after a page it must precede."""
    for index, page in enumerate(update):
        earlier = update[:index]
        if any(after in earlier for after in rules.get(page, ())):
            return False
    return True


def middle(update: Sequence[int]) -> int:
    return update[len(update) // 2]


def _first_index(pages: Sequence[int], value: int) -> int | None:
    try:
        return pages.index(value)
    except ValueError:
        return None


def _correct_at_index(pages: list[int], rules: Rules, index: int) -> None:
    while True:
        page = pages[index]
        target = index
        earlier = pages[:index]
        for after in rules.get(page, ()):
            found = _first_index(earlier, after)
            if found is not None and found < target:
                target = found
        if target == index:
            return
        del pages[index]
        pages.insert(target, page)


def correct(update: Sequence[int], rules: Rules) -> list[int]:
    """Reorder an update so that it satisfies the rules."""
    pages = list(update)
    for index in reversed(range(len(pages))):
        _correct_at_index(pages, rules, index)
    return pages


def sum_valid_middles(queue: PrintQueue) -> int:
    return sum(middle(update) for update in queue.updates if satisfies(update, queue.rules))


def correct_and_sum_invalid_middles(queue: PrintQueue) -> int:
    return sum(
        middle(correct(update, queue.rules))
        for update in queue.updates
        if not satisfies(update, queue.rules)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check the print queue.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    queue = load(args.path)
    print(f"Result 1: {sum_valid_middles(queue)}")
    print(f"Result 2: {correct_and_sum_invalid_middles(queue)}")