# aoc2025

Solutions to the first eight days of the 2025 Advent of Code puzzles. Each day is a
module with a parser for the puzzle input, the functions that solve each part, and a
command that prints both answers.

## Installation

```
pip install .
```

To include the test dependencies as well:

```
pip install ".[test]"
```

## Command-line use

Each day has a command that reads a puzzle input file and prints the answer to part 1,
then the answer to part 2, one per line. When no file is given, it reads `input.txt`
in the current directory. If the file is missing, empty or malformed, the command
exits with an error message.

```
aoc2025-day1 input.txt
aoc2025-day2 input.txt
aoc2025-day3 input.txt
aoc2025-day4 input.txt
aoc2025-day5 input.txt
aoc2025-day6 input.txt
aoc2025-day7 input.txt
aoc2025-day8 input.txt
```

| Command        | Module          | Puzzle                                                         |
|----------------|-----------------|----------------------------------------------------------------|
| `aoc2025-day1` | `aoc2025.day1`  | Dial rotations: landings on zero, then every pass through zero |
| `aoc2025-day2` | `aoc2025.day2`  | IDs made of a digit pattern repeated twice, or two or more times |
| `aoc2025-day3` | `aoc2025.day3`  | Largest joltage from 2 and from 12 batteries in each bank      |
| `aoc2025-day4` | `aoc2025.day4`  | Paper rolls reachable by forklift, then removed repeatedly     |
| `aoc2025-day5` | `aoc2025.day5`  | Fresh ingredient IDs from merged ranges                        |
| `aoc2025-day6` | `aoc2025.day6`  | Math worksheet read by rows, then by character columns         |
| `aoc2025-day7` | `aoc2025.day7`  | Tachyon beam splits, and the number of possible timelines      |
| `aoc2025-day8` | `aoc2025.day8`  | Junction boxes joined into circuits, shortest distance first   |

`aoc2025-day8` also takes `--connections N`, the number of shortest connections to
make for the first answer. It defaults to 1000, the number the puzzle input uses; the
worked example uses 10:

```
aoc2025-day8 example.txt --connections 10
```

## Library use

Each module's `part1` and `part2` take input that has already been parsed, so you can
work with puzzle text directly:

```python
from aoc2025 import day1, day5

rotations = day1.parse_rotations("L68\nL30\nR48")
print(day1.part1(rotations), day1.part2(rotations))

ranges, ids = day5.parse_inventory("3-5\n10-14\n\n1\n5\n11")
print(day5.part1(ranges, ids), day5.part2(ranges))
```

`day5.part1` and `day5.part2` sort and merge the ranges themselves; `day5.merge_ranges`
and `day5.find_range` are available on their own as well.

Day 6 reads the same worksheet two ways and totals it with `calculate`:

```python
from aoc2025 import day6

print(day6.calculate(day6.parse_rows(text)))
print(day6.calculate(day6.parse_columns(text)))
```

Day 8 returns its edges already sorted shortest first, which is what both parts expect:

```python
from aoc2025 import day8

points = day8.parse_points(text)
edges = day8.build_edges(points)
print(day8.part1(edges, 10))
print(day8.part2(points, edges))
```

`aoc2025.seqtools` holds two small sequence helpers, `element_from_end` and
`find_all_indices`.

## What it does not do

The package does not download puzzle inputs or submit answers; you supply the input
file yourself. It covers days one through eight only.

## Running the tests

```
pytest
```