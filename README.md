# aoc22

Solutions to days 1 to 9 of Advent of Code 2022, as a small Python library
and a command that prints every answer.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Running the puzzles

Put your puzzle inputs in a directory, named `day1.txt` through `day9.txt`.
By default the command looks for a directory called `inputs` in the current
directory:

    aoc22

Another directory can be given with `--inputs`:

    aoc22 --inputs path/to/inputs

It prints the answers in order, day by day and part by part:

- Day 1: the calories carried by the three best-supplied elves.
- Day 2: rock-paper-scissors scores under both readings of the strategy guide.
- Day 3: priorities of misplaced rucksack items and of group badges.
- Day 4: section assignments that fully contain or overlap one another.
- Day 5: the crates on top of each stack, moved one at a time and all at once.
- Day 6: where the first start-of-packet (4) and start-of-message (14) markers end.
- Day 7: the total of directory sizes of at most 100000, and the size of the
  smallest directory whose deletion frees enough space.
- Day 8: the number of visible trees and the best scenic score.
- Day 9: positions visited by the tail of a 2-knot and a 10-knot rope.

If an input file cannot be read or holds something the puzzles cannot make
sense of, the command prints `error: ...` to standard error and exits with
status 1. Answers printed before the failure stay printed.

## Using the library

Each day lives in its own module (`aoc22.day1` to `aoc22.day9`). Every module
has a `run` function, or `run_part1` and `run_part2`, that takes the path to an
input file and prints the answer (`aoc22.day6.run` also takes the marker
length). The pieces underneath can also be used on their own:

```python
from aoc22.day1 import find_richest_elves
from aoc22.day2 import calculate_score, decode_opponent, decode_self
from aoc22.day4 import parse_section_range
from aoc22.day5 import CrateStacks
from aoc22.day6 import find_marker
from aoc22.day9 import Bridge, Direction

find_richest_elves(3, [1, 2, 3, 4, 5, 6])        # 15

calculate_score(decode_self("Y"), decode_opponent("A"))   # 8: paper beats rock

parse_section_range("2-8").fully_contains(parse_section_range("3-7"))  # True

stacks = CrateStacks([["Z", "N"], ["M", "C", "D"], ["P"]])
stacks.move(1, 2, 1, keep_order=False)
stacks.top_crates()                               # ['D', 'C', 'P']

find_marker("bvwbjplbgvbhsrlpgdmjqwftvncz", 4)    # 5

rope = Bridge((0, 0), 2)
rope.move(Direction.RIGHT, 4)
rope.total_visited()                              # 4
```

Each module also has readers that turn the lines of an input file into the
values the puzzle works on, such as `aoc22.day1.read_elf_calories`,
`aoc22.day5.read_moves` or `aoc22.day7.read_commands`. Day 7 rebuilds the
directory tree with `aoc22.day7.Context`, and day 8 answers visibility
questions with `aoc22.day8.TreeMap`. `Bridge.render_seen` and
`Bridge.render_state` return the rope's trail or its knots as a text grid.

The `aoc22.utils` module holds two small helpers used by the puzzles:
`reverse_list` and `intersect_all`.