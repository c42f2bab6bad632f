# advent2024

Solutions to the 25 puzzles of Advent of Code 2024. Each day has its own
module, `advent2024.day01` to `advent2024.day25`. Each module also has a
command that reads your puzzle input and prints the answers.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running a day

Save your puzzle input to a file. Then pass its path to the command for that day:

```
advent2024-day01 data
advent2024-day11 data
advent2024-day22 data
```

There is a command for every day from `advent2024-day01` to `advent2024-day25`.
Without an argument, a command reads the file `data` in the current directory.

Some commands do not print a single number per part:

- `advent2024-day14` prints the safety factor. It then draws the room at
  many moments in time, so you can spot the picture by eye.
- `advent2024-day16` prints the lowest score and the number of tiles on a best
  path as a pair.
- `advent2024-day17` prints the program output. It then searches for the
  value of register A that makes the program print itself, and that search can
  take a long time.
- `advent2024-day23` prints the number of triangles that hold a computer
  starting with `t`. It then prints the size of the largest groups and lists them.

## Using the modules

The solving functions take parsed input, so you can call them directly:

```python
from advent2024 import day01, day03, day11

entries = day01.read_from_string("3   4\n4   3\n2   5\n1   3\n3   9\n3   3")
print(entries.distance(), entries.similarity())

print(day03.calculate("xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"))

stones = day11.parse_stones("125 17\n")
print(day11.count_after(stones, 25))
```

The grid puzzles share `advent2024.grid`, which provides `Coordinate`, `Grid`
and `read_grid`. Helpers for line-based input are in `advent2024.parsing`
(`read_lines`, `atoi`).

## What it does not do

- It does not download puzzle input. You supply the file yourself.
- `advent2024-day24` only simulates the circuit and prints the number formed
  by the `z` wires. It does not search for swapped gate outputs.