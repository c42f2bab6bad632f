"""Solutions to the Advent of Code 2024 puzzles, one module per day."""

__version__ = "0.1.0"