# questbook

Solvers for days 2 to 16 of a season of three-part programming puzzles. Each day has its own module, `questbook.day02` through `questbook.day16`. Each module has `part1`, `part2` and `part3` functions. The package also provides a `questbook` command that runs one day against your input files.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Puzzle inputs

Inputs are plain text files, one per day and part, under a base directory:

```
Day3/Part1.txt
Day3/Part2.txt
Day3/Part3.txt
...
```

`questbook.helpers.read_day(day, part, base_dir=None)` reads `Day<day>/Part<part>.txt` under `base_dir` and returns its lines. Without a `base_dir` it reads from the current working directory. `read_file(path, base_dir=None)` does the same for any relative path. A missing file raises `OSError`.

## Running a day

```
questbook            # day 16, inputs under the current directory
questbook 7          # day 7
questbook 7 --base-dir inputs
```

The command first prints the platform and the current directory. It then prints one line per part:

```
Day 7 - Part 1: ...
Day 7 - Part 2: ...
Day 7 - Part 3: ...
```

If you ask for a day that has no solver, the command prints `TILT` and exits with status 0. A missing input file, or an input that cannot be solved, produces a message on standard error and exit status 1.

The same thing from Python:

```python
from questbook.cli import run_day

for line in run_day(7, "inputs"):
    print(line)
```

`run_day` raises `ValueError` for a day that has no solver. It returns an iterator of answer lines, and each input file is read as that line is produced.

## Using the solvers directly

Each `partN` function takes the lines of its input and returns the answer:

```python
from questbook.helpers import read_day
from questbook import day09

lines = read_day(9, 2, "inputs")
print(day09.part2(lines))
```

A few parts differ from that pattern:

- `day02.part1()` takes no input. Its text and word list are built into the module. When day 2 is run through the command, only `Day2/Part2.txt` and `Day2/Part3.txt` are read.
- `day05.part2(lines, rounds=1_000_000_000)` and `day05.part3(lines, rounds=100_000_000)` accept a smaller round count, which helps when experimenting.
- `day16.part3(lines)` returns a `(most, fewest)` pair of coin totals. The lookahead is two pulls.

Inputs that cannot be solved raise `ValueError`. Examples are a map with no start, a target no catapult can reach, or a herb that cannot be reached.

The smaller building blocks are public and can be reused on their own. Some examples:

- `day02.find_word_on_grid`: finds words in a grid, reading left, right (wrapping around the row), up and down.
- `day09.min_coins` and `day09.min_coins_table`: fewest coins for an amount.
- `day11.population_size`: growth of a population from breeding rules.
- `day13.parse_platforms` and `day13.shortest_path`: cheapest route across wrapped levels.
- `day14.trace`: follows growth steps through 3-D space.
- `day15.bfs` and `day15.path_length`: breadth-first search on a garden map.
- `day16.generate_combinations` and `day16.get_limit`: enumerates wheel positions and searches ahead.

`questbook.helpers` also has `Point` and `Point3` for grid positions, as well as `split`, `split_into_chars` and `left_pad`.

Several modules can render their state as text for inspection. These return strings with terminal colour codes and print nothing:

- `day02.render_map`
- `day03.render_map`
- `day04.render_table`
- `day05.render_dance`
- `day06.render_tree`

## What is not included

- There is no solver for day 1. Neither `questbook 1` nor `run_day(1)` can run it.
- `day15.part3` only reads and checks the third garden. The route is not solved, and the function always returns 0.