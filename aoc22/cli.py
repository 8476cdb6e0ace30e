"""Command line entry point that solves every puzzle from an input directory."""

import argparse
import sys
from pathlib import Path

from aoc22 import day1, day2, day3, day4, day5, day6, day7, day8, day9


def main(argv=None) -> int:
    """Solve every day's puzzle from dayN.txt files in the input directory."""
    parser = argparse.ArgumentParser(description="Solve the puzzles of days 1 to 9.")
    parser.add_argument(
        "--inputs",
        default="inputs",
        help="directory holding day1.txt to day9.txt (default: inputs)",
    )
    args = parser.parse_args(argv)
    directory = Path(args.inputs)

    def path(day: int) -> str:
        return str(directory / f"day{day}.txt")

    try:
        day1.run(path(1))
        day2.run_part1(path(2))
        day2.run_part2(path(2))
        day3.run_part1(path(3))
        day3.run_part2(path(3))
        day4.run(path(4))
        day5.run_part1(path(5))
        day5.run_part2(path(5))
        day6.run(path(6), 4)
        day6.run(path(6), 14)
        day7.run(path(7))
        day8.run(path(8))
        day9.run(path(9))
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())