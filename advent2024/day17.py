"""Chronospatial Computer: a small three-bit machine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Sequence

from advent2024.parsing import _split_lines, atoi

A, B, C = 0, 1, 2

REGISTER_PREFIXES = {"Register A": A, "Register B": B, "Register C": C}
PROGRAM_PREFIX = "Program"
_SEARCH_LIMIT = 1 << 24
_FULL_SEARCH_LIMIT = 1_000_000_000_000_000
_SPLIT = 8


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


@dataclass
class Computer:
    """Program, registers A, B and C, instruction pointer and output."""

    program: list[int]
    registers: list[int] = field(default_factory=lambda: [0, 0, 0])
    instruction_pointer: int = 0
    output: list[int] = field(default_factory=list)

    def run(self) -> None:
        while self.instruction_pointer < len(self.program):
            self.step()

    def _operand(self) -> int:
        return self.program[self.instruction_pointer + 1]

    def combo_operand(self) -> int:
        operand = self._operand()
        if operand < 4:
            return operand
        if operand == 7:
            raise ValueError("combo operand 7 is reserved")
        return self.registers[operand % 4]

    def step(self) -> None:
        """Execute the instruction at the instruction pointer."""
        opcode = self.program[self.instruction_pointer]
        regs = self.registers
        if opcode == 0:
            regs[A] = regs[A] >> self.combo_operand()
        elif opcode == 1:
            regs[B] = regs[B] ^ self._operand()
        elif opcode == 2:
            regs[B] = _truncated_mod(self.combo_operand(), 8)
        elif opcode == 3:
            if regs[A] != 0:
                self.instruction_pointer = self._operand()
                return
        elif opcode == 4:
            regs[B] = regs[B] ^ regs[C]
        elif opcode == 5:
            self.output.append(_truncated_mod(self.combo_operand(), 8) & 0xFF)
        elif opcode == 6:
            self.combo_operand()
            # The divisor is always zero: this instruction cannot complete.
            raise ZeroDivisionError("bdv divides by zero")
        elif opcode == 7:
            regs[C] = regs[A] >> self.combo_operand()
        self.instruction_pointer += 2

    def run_with_a(self, value: int) -> list[int]:
        """Output of running a copy of this computer with register A set."""
        copy = replace(
            self, registers=[value, *self.registers[1:]], output=list(self.output)
        )
        copy.run()
        return copy.output

    def find_a_input_for(self, expected: Sequence[int]) -> int | None:
        """The smallest A below 2**24 whose output equals expected."""
        target = list(expected)
        for value in range(_SEARCH_LIMIT):
            result = self.run_with_a(value)
            if result == target:
                return value
            if len(result) == 17:
                break
        return None

    def find_a_input_from(self, start: int, expected: Sequence[int]) -> int | None:
        """The first A from start onwards whose output equals expected."""
        target = list(expected)
        for value in range(start, _FULL_SEARCH_LIMIT):
            if self.run_with_a(value) == target:
                return value
        return None

    def find_self_replicating_input(self) -> int | None:
        """The A that makes the program output itself, searched in two halves."""
        rest = self.find_a_input_for(self.program[_SPLIT:])
        if rest is None:
            return None
        return self.find_a_input_from(rest << (_SPLIT * 3), self.program)


def parse_program(text: str) -> list[int]:
    return [atoi(part) & 0xFF for part in text.split(",")]


def parse_computer(text: str) -> Computer:
    """Parse register lines and a program line."""
    computer = Computer(program=[])
    for line in _split_lines(text):
        if not line:
            continue
        prefix, separator, _ = line.partition(":")
        if not separator:
            raise ValueError(f"Invalid input : not found {line}")
        value = line[len(prefix) + 2 :]
        if prefix in REGISTER_PREFIXES:
            computer.registers[REGISTER_PREFIXES[prefix]] = atoi(value)
        elif prefix == PROGRAM_PREFIX:
            computer.program = parse_program(value)
    return computer


def load_computer(path: str | Path) -> Computer:
    return parse_computer(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the three-bit computer.")
    parser.add_argument("path", nargs="?", default="data", help="puzzle input file")
    args = parser.parse_args(argv)
    computer = load_computer(args.path)
    computer.run()
    print(",".join(str(value) for value in computer.output))
    result = load_computer(args.path).find_self_replicating_input()
    print(result)
    if result is not None:
        print(load_computer(args.path).run_with_a(result))
    print(load_computer(args.path).program)