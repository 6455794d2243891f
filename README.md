# adventsolve

Solvers for nine days of programming puzzles. Each day's solver reads its
puzzle input from a text file in the current directory and prints the
answer.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Run a day's solver by naming its module:

```
aoc d1
```

`aoc --version` prints the version. Run with no arguments, `aoc` prints its
help and exits with status 2. An unknown module name is reported as an error.

The available modules are `d1` through `d9`. Each one reads a fixed input
file from the working directory:

| Module | Input file      | What it prints                                                      |
|--------|-----------------|---------------------------------------------------------------------|
| d1     | day1_input.txt  | How many clicks of the dial land on zero                            |
| d2     | gift_shop.txt   | Sum of the ids in the ranges whose digits are a repeated pattern    |
| d3     | battery.txt     | Sum over all batteries of the largest 12-digit joltage              |
| d4     | forklift.txt    | Number of paper rolls removed before none can be reached            |
| d5     | cafe.txt        | Number of fresh ingredients and number of fresh ids                 |
| d6     | trash.txt       | Sum of the results of every worksheet column                        |
| d7     | beam.txt        | Number of tachyon beam timelines                                    |
| d8     | junction.txt    | The pair that joins the last two circuits and the product of their x|
| d9     | movie.txt       | Area of the largest rectangle inside the polygon                    |

## Using the solvers from Python

Every day module offers a `solve` function that works on the puzzle text
directly (day 7's is `count_timelines`), so the solvers can be used without
input files:

```python
from adventsolve import day1, day5, day7

print(day1.solve(["L68", "L30", "R48"]))

ranges, ids = day5.parse_inventory(["3-5", "10-14", "", "1", "5"])
merged = day5.merge_ranges(ranges)

print(day7.count_timelines("..S..\n.....\n"))
```

Each day module also has a `run(path)` function that reads the named file,
prints the answer and returns it; the `aoc` command calls it with the
default file name shown above.

Two further modules hold alternative solvers that are only available from
Python:

- `adventsolve.day1_rollover` counts zero passes per twist arithmetically
  instead of click by click.
- `adventsolve.day8_pairs` connects the closest pairs of junction boxes
  (`solve(lines, connections=10)`) and returns the product of the sizes of
  the three largest circuits.

## Limitations

- The `aoc` command has no option for choosing an input file; it always
  reads the fixed file name for the chosen module. Use `run(path)` from
  Python to read another file.
- The alternative solvers in `day1_rollover` and `day8_pairs` have no
  command of their own.