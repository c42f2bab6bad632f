"""Monkey Market: pseudorandom secret numbers and banana prices."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from advent2024.parsing import atoi, read_lines

PRUNE_MODULUS = 16777216
STEPS = 2000
WINDOW = 4

Changes = tuple[int, ...]


def mix(value: int, secret: int) -> int:
    """Combine a value into the secret with bitwise exclusive or."""
    return value ^ secret


def prune(secret: int) -> int:
    """Keep the secret within its 24-bit range."""
    return secret % PRUNE_MODULUS


def advance(secret: int) -> int:
    """The next secret number in the sequence."""
    secret = prune(mix(secret * 64, secret))
    secret = prune(mix(secret // 32, secret))
    secret = prune(mix(secret * 2048, secret))
    return secret


def read_secrets(path: str | Path) -> list[int]:
    """One initial secret per line."""
    return [atoi(line) for line in read_lines(path)]


def _evolve(secret: int, steps: int) -> int:
    for _ in range(steps):
        secret = advance(secret)
    return secret


def part1_for_data(secrets: Iterable[int]) -> int:
    """Sum of every buyer's secret after two thousand steps."""
    return sum(_evolve(secret, STEPS) for secret in secrets)


def calculate_prices(secrets: Iterable[int]) -> tuple[list[list[int]], list[list[int]]]:
    """Per buyer, the 2001 prices (last digits) and the 2000 changes between them."""
    all_prices: list[list[int]] = []
    all_diffs: list[list[int]] = []
    for secret in secrets:
        prices = [secret % 10]
        for _ in range(STEPS):
            secret = advance(secret)
            prices.append(secret % 10)
        all_prices.append(prices)
        all_diffs.append([after - before for before, after in zip(prices, prices[1:])])
    return all_prices, all_diffs


def max_full_price(prices: Mapping[Changes, Sequence[int | None]]) -> int:
    """The most bananas any single change sequence earns across all buyers."""
    best = 0
    for per_buyer in prices.values():
        total = sum(price for price in per_buyer if price is not None)
        best = max(best, total)
    return best


def part2_for_data(secrets: Sequence[int]) -> tuple[int, dict[Changes, list[int | None]]]:
    """The best total and, per four-change sequence, each buyer's first sale price."""
    prices, diffs = calculate_prices(secrets)
    by_changes: dict[Changes, list[int | None]] = {}
    for buyer, row in enumerate(diffs):
        for end in range(WINDOW - 1, len(row)):
            key = tuple(row[end - WINDOW + 1 : end + 1])
            per_buyer = by_changes.setdefault(key, [None] * len(secrets))
            if per_buyer[buyer] is None:
                per_buyer[buyer] = prices[buyer][end + 1]
    return max_full_price(by_changes), by_changes


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trade with the monkeys.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    secrets = read_secrets(args.path)
    print(part1_for_data(secrets))
    best, _ = part2_for_data(secrets)
    print(best)