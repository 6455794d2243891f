"""Command line entry point that runs one day's puzzle solution."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from adventsolve import (
    day1,
    day2,
    day3,
    day4,
    day5,
    day6,
    day7,
    day8,
    day9,
)

VERSION = "0.1.0"

MODULES: dict[str, Callable[[], object]] = {
    "d1": day1.run,
    "d2": day2.run,
    "d3": day3.run,
    "d4": day4.run,
    "d5": day5.run,
    "d6": day6.run,
    "d7": day7.run,
    "d8": day8.run,
    "d9": day9.run,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc", description="Runs aoc answers")
    parser.add_argument("--version", action="version", version=f"aoc {VERSION}")
    parser.add_argument("module", help="The module to run")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solution named on the command line, reading its input file."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    if not args_list:
        parser.print_help(sys.stderr)
        raise SystemExit(2)
    args = parser.parse_args(args_list)
    runner = MODULES.get(args.module)
    if runner is None:
        parser.error(f"No module {args.module}")
    runner()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())