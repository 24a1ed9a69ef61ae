# aoc21

Solutions to the 2021 Advent of Code puzzles for days 1, 2, 6, 8, 9, 10,
12, 14, 18, 19, 20, 21 and 22. Each day lives in its own module:

| Module          | Puzzle                                   |
|-----------------|------------------------------------------|
| `aoc21.day01`   | sonar sweep depth increases              |
| `aoc21.day02`   | steering the submarine                   |
| `aoc21.day06`   | lanternfish population growth            |
| `aoc21.day08`   | scrambled seven-segment displays         |
| `aoc21.day09`   | low points and basins                    |
| `aoc21.day10`   | corrupted and incomplete bracket lines   |
| `aoc21.day12`   | paths through a cave system              |
| `aoc21.day14`   | extended polymerization                  |
| `aoc21.day18`   | snailfish number arithmetic              |
| `aoc21.day19`   | reassembling the beacon map              |
| `aoc21.day20`   | image enhancement                        |
| `aoc21.day21`   | Dirac Dice                               |
| `aoc21.day22`   | reactor reboot with cuboids              |

Every day module has the same shape:

- `parse(text)` turns the raw puzzle input into the data the day works on;
- `part_a(data)` and `part_b(data)` return the answers to the two halves
  of the puzzle as integers.

Malformed input raises `ValueError`. Two days are lenient instead: in
day 1 a line that is not a depth becomes `INVALID_DEPTH` (65535), and in
day 2 a line with an unknown command becomes a `NOOP` command; both are
reported through the `logging` module.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it

```python
from pathlib import Path

from aoc21 import day01

depths = day01.parse(Path("input.txt").read_text())
print(day01.part_a(depths))
print(day01.part_b(depths))
```

Several days expose their building blocks as well, for example:

- `aoc21.day06.simulate(fishes, days)` – fish count after any number of days;
- `aoc21.day12.Graph` with `find_simple_paths(start, end, visiting_twice)`;
- `aoc21.day14.run(data, steps)` – element count spread after any number of steps;
- `aoc21.day18.SailfishNumber`, which supports `+` and `magnitude()`;
- `aoc21.day19.solve(sensors)` – all beacons and every sensor position;
- `aoc21.day20.enhance(data, steps)` – lit pixels after any number of steps;
- `aoc21.day21.deterministic_game`, `count_wins_brute_force` and
  `count_wins_cached`;
- `aoc21.day22.count_on(commands)` with the `Cube` and `Span` types.

`aoc21.tools.parse_number(value, radix=10)` is the strict integer parser
the days share: it accepts an optional sign followed by digits of the
radix and nothing else.

## What it does not do

- The puzzles of days 3, 4, 5, 7, 11, 13, 15, 16 and 17 are not included.
- There is no command-line program: the package is used from Python,
  reading the input text yourself and passing it to a day's `parse`.