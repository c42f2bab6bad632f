"""LAN Party: find groups of computers that are all connected."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from advent2024.parsing import read_lines

Lan = tuple[str, ...]
NodeMap = Mapping[str, Sequence[str]]
HISTORIAN_PREFIX = "t"


def parse_network(lines: Iterable[str]) -> tuple[dict[str, list[str]], list[Lan]]:
    """Neighbour lists per computer and the sorted list of connected pairs."""
    nodes: dict[str, list[str]] = {}
    groups: list[Lan] = []
    for line in lines:
        left, separator, right = line.partition("-")
        if not separator:
            raise ValueError(f"invalid connection {line!r}")
        nodes.setdefault(left, []).append(right)
        nodes.setdefault(right, []).append(left)
        groups.append(tuple(sorted((left, right))))
    groups.sort()
    return nodes, groups


def read_network(path: str | Path) -> tuple[dict[str, list[str]], list[Lan]]:
    return parse_network(read_lines(path))


def next_group_size(node_map: NodeMap, sets: Sequence[Lan]) -> list[Lan]:
    """Extend sorted groups of equal size by one connected computer.

    Two groups sharing all but their last member combine when those last
    members are connected. The final three groups are never extended.
    """
    extended: list[Lan] = []
    for index in range(len(sets) - 3):
        group = sets[index]
        for other in sets[index + 1 :]:
            if group[:-1] != other[:-1]:
                break
            if other[-1] in node_map.get(group[-1], ()):
                extended.append(group + (other[-1],))
    return sorted(set(extended))


def solve(node_map: NodeMap, sets: Sequence[Lan]) -> tuple[int, list[Lan]]:
    """Triangles holding a 't' computer, and the largest groups found."""
    current = list(sets)
    size = 2
    with_historian = 0
    while True:
        following = next_group_size(node_map, current)
        size += 1
        if not following:
            return with_historian, current
        if size == 3:
            with_historian = sum(
                1
                for group in following
                if any(name.startswith(HISTORIAN_PREFIX) for name in group)
            )
        current = following


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the LAN party.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    triangles, largest = solve(*read_network(args.path))
    print(triangles)
    if largest:
        print(len(largest[0]))
        for group in largest:
            print(",".join(group))