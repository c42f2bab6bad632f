"""Helpers for reading puzzle input files and integers."""

from __future__ import annotations

import re
from pathlib import Path

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_LITERAL = re.compile(
    r"(?P<sign>[+-]?)(?:"
    r"0[xX]_?(?P<hex>[0-9a-fA-F](?:_?[0-9a-fA-F])*)"
    r"|0[oO]_?(?P<oct>[0-7](?:_?[0-7])*)"
    r"|0[bB]_?(?P<bin>[01](?:_?[01])*)"
    r"|0_?(?P<legacy>[0-7](?:_?[0-7])*)"
    r"|(?P<dec>0|[1-9](?:_?[0-9])*)"
    r")"
)
_LITERAL_BASES = (("hex", 16), ("oct", 8), ("bin", 2), ("legacy", 8), ("dec", 10))


def _check_range(value: int, text: str) -> int:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def atoi(text: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits."""
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    return _check_range(int(text), text)


def _parse_int_literal(text: str) -> int:
    """Parse an integer literal whose base follows from its prefix.

    ``0x``, ``0o`` and ``0b`` select hexadecimal, octal and binary, a bare
    leading zero selects octal, and underscores may separate digits.
    """
    match = _LITERAL.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid syntax: {text!r}")
    value = 0
    for group, base in _LITERAL_BASES:
        digits = match.group(group)
        if digits is not None:
            value = int(digits.replace("_", ""), base)
            break
    if match.group("sign") == "-":
        value = -value
    return _check_range(value, text)


def _split_lines(text: str) -> list[str]:
    """Split text into lines, dropping line terminators and a final empty line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a text file without their terminators."""
    return _split_lines(Path(path).read_text(encoding="utf-8"))