"""Solutions to the Advent of Code 2022 puzzles, days 1 to 9, with a command to run them."""

__version__ = "0.1.0"