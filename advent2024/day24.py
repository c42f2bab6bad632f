"""Crossed Wires: simulate a circuit of logic gates."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from advent2024.parsing import atoi, read_lines

logger = logging.getLogger(__name__)

OUTPUT_PREFIX = "z"


class Operation(Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def apply(self, left: bool, right: bool) -> bool:
        if self is Operation.AND:
            return left and right
        if self is Operation.OR:
            return left or right
        return left != right


@dataclass(frozen=True)
class Gate:
    """A gate combining two wires into a destination wire."""

    left: str
    operation: Operation
    right: str
    destination: str

    @property
    def has_z_result(self) -> bool:
        return self.destination.startswith(OUTPUT_PREFIX)

    def __str__(self) -> str:
        return f"{self.left} {self.operation.value} {self.right} -> {self.destination}"


def _parse_gate(line: str) -> Gate:
    parts = line.split(" ")
    if len(parts) != 5:
        raise ValueError(f"invalid gate {line!r}")
    try:
        operation = Operation(parts[1])
    except ValueError:
        raise ValueError("unexpected operation") from None
    return Gate(parts[0], operation, parts[2], parts[4])


def parse_circuit(lines: Sequence[str]) -> tuple[list[Gate], dict[str, bool]]:
    """Initial wire values, a blank line, then one gate per line."""
    try:
        split = list(lines).index("")
    except ValueError:
        raise ValueError("missing blank line between wires and gates") from None
    registers: dict[str, bool] = {}
    for line in lines[:split]:
        name, separator, value = line.partition(": ")
        if not separator:
            raise ValueError(f"invalid wire {line!r}")
        registers[name] = value == "1"
    gates = [_parse_gate(line) for line in lines[split + 1 :]]
    return gates, registers


def load_circuit(path: str | Path) -> tuple[list[Gate], dict[str, bool]]:
    return parse_circuit(read_lines(path))


def execute(gates: Iterable[Gate], registers: Mapping[str, bool]) -> dict[str, bool]:
    """Wire values after evaluating gates until every z wire is known.

    If no further gate can be evaluated, the values found so far are returned
    and the unresolved z wires are logged.
    """
    values = dict(registers)
    pending = list(gates)
    while any(gate.has_z_result for gate in pending):
        remaining = []
        for gate in pending:
            if gate.left in values and gate.right in values:
                values[gate.destination] = gate.operation.apply(
                    values[gate.left], values[gate.right]
                )
            else:
                remaining.append(gate)
        if len(remaining) == len(pending):
            for gate in pending:
                if gate.has_z_result:
                    logger.warning(
                        "%s", describe_feeding(values, pending, gate.destination, 0)
                    )
            logger.warning("circuit cannot be resolved")
            break
        pending = remaining
    return values


def run_with_registers(gates: Iterable[Gate], registers: Mapping[str, bool]) -> int:
    """The number formed by the z wires, z00 being the lowest bit."""
    values = execute(gates, registers)
    return sum(
        1 << atoi(name[1:])
        for name, value in values.items()
        if value and name.startswith(OUTPUT_PREFIX)
    )


def _input_description(
    registers: Mapping[str, bool],
    gates: Sequence[Gate],
    side: str,
    wire: str,
    depth: int,
) -> str:
    indent = " " * depth
    if wire in registers:
        value = "true" if registers[wire] else "false"
        return f"\n{indent}{side} in registers {wire} with value {value}"
    return (
        f"\n{indent}{side}(\n"
        + describe_feeding(registers, gates, wire, depth + 1)
        + f"\n{indent})"
    )


def describe_feeding(
    registers: Mapping[str, bool], gates: Sequence[Gate], looking_for: str, depth: int
) -> str:
    """A tree of the gates feeding a wire, down to known values or missing wires."""
    indent = " " * depth
    parts = [indent + looking_for]
    found = False
    for gate in gates:
        if gate.destination != looking_for:
            continue
        found = True
        parts.append(indent + str(gate))
        parts.append(_input_description(registers, gates, "left", gate.left, depth))
        parts.append(_input_description(registers, gates, "right", gate.right, depth))
    if not found:
        parts.append(indent + "Not found")
    return "".join(parts)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate the gate circuit.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    print(run_with_registers(*load_circuit(args.path)))