"""Solvers for nine days of programming puzzles, with the ``aoc`` command."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "day1",
    "day1_rollover",
    "day2",
    "day3",
    "day4",
    "day5",
    "day6",
    "day7",
    "day8",
    "day8_pairs",
    "day9",
]