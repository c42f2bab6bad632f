"""Disk Fragmenter: compact a disk map and compute its checksum."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Sequence

EMPTY_ID = -1


@dataclass(frozen=True)
class DiskFile:
    """A run of blocks: a file's id, or EMPTY_ID for free space."""

    file_id: int
    length: int

    @property
    def is_free(self) -> bool:
        return self.file_id == EMPTY_ID


def parse_disk_map(text: str) -> list[int]:
    """Parse the dense disk map into a list of digit lengths."""
    digits = text.rstrip("\n")
    if not all(char in "0123456789" for char in digits):
        raise ValueError(f"disk map must contain only digits: {digits!r}")
    return [int(char) for char in digits]


def read_disk_map(path: str | Path) -> list[int]:
    return parse_disk_map(Path(path).read_text(encoding="utf-8"))


def sum_between_inclusive(left: int, right: int) -> int:
    """Sum of all integers from left to right inclusive."""
    return (right - left + 1) * (left + right) // 2


def compact_blocks(data: Sequence[int]) -> int:
    """Checksum after moving single blocks from the end into free space."""
    lengths = list(data)
    total = 0
    tail = len(lengths) - 1
    location = 0
    index = 0
    while index <= tail:
        if index % 2 == 0:
            length = lengths[index]
            total += sum_between_inclusive(location, location + length - 1) * (index // 2)
            location += length
        else:
            free = lengths[index]
            while free:
                if tail < 0:
                    raise ValueError("disk map ran out of files to move")
                file_id = tail // 2
                if free >= lengths[tail]:
                    moved = lengths[tail]
                    total += sum_between_inclusive(location, location + moved - 1) * file_id
                    location += moved
                    free -= moved
                    lengths[tail] = 0
                    tail -= 2
                else:
                    total += sum_between_inclusive(location, location + free - 1) * file_id
                    location += free
                    lengths[tail] -= free
                    free = 0
        index += 1
    return total


def find_first_free(
    min_length: int, files: Iterable[DiskFile]
) -> tuple[int, DiskFile] | None:
    """The first free run at least min_length long, with its index."""
    for index, disk_file in enumerate(files):
        if disk_file.is_free and min_length <= disk_file.length:
            return index, disk_file
    return None


def _initial_files(data: Sequence[int]) -> list[DiskFile]:
    return [
        DiskFile(index // 2 if index % 2 == 0 else EMPTY_ID, length)
        if length
        else DiskFile(0, 0)
        for index, length in enumerate(data)
    ]


def compact_files(data: Sequence[int]) -> list[DiskFile]:
    """Move whole files, right to left, into the leftmost free run that fits."""
    files = _initial_files(data)
    index = len(files) - 1
    while index >= 0:
        current = files[index]
        if not current.is_free:
            found = find_first_free(current.length, islice(files, index))
            if found is not None:
                match, matched = found
                files[index] = DiskFile(EMPTY_ID, current.length)
                files[match] = current
                if current.length != matched.length:
                    files.insert(match + 1, DiskFile(EMPTY_ID, matched.length - current.length))
                    index += 1
        index -= 1
    return files


def checksum(files: Iterable[DiskFile]) -> int:
    total = 0
    location = 0
    for disk_file in files:
        if disk_file.file_id > 0:
            end = location + disk_file.length - 1
            total += sum_between_inclusive(location, end) * disk_file.file_id
        location += disk_file.length
    return total


def render(files: Iterable[DiskFile]) -> str:
    """The block layout, '.' for free blocks and the id for file blocks."""
    return "".join(
        ("." if disk_file.is_free else str(disk_file.file_id)) * disk_file.length
        for disk_file in files
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compact the disk.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    data = read_disk_map(args.path)
    print(compact_blocks(data))
    print(checksum(compact_files(data)))