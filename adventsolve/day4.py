"""Forklift floor: repeatedly remove paper rolls that a forklift can reach."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence

PAPER = "@"
EMPTY = "."
_CROWDED = 4


def is_accessible(floor: Sequence[Sequence[str]], x: int, y: int) -> bool:
    """True when fewer than four of the up to eight neighbours hold paper."""
    rows = range(max(y - 1, 0), min(y + 1, len(floor) - 1) + 1)
    cols = range(max(x - 1, 0), min(x + 1, len(floor[y]) - 1) + 1)
    neighbours = sum(
        1
        for j in rows
        for i in cols
        if (i, j) != (x, y) and floor[j][i] == PAPER
    )
    return neighbours < _CROWDED


def remove_rolls(floor: Sequence[MutableSequence[str]]) -> int:
    """Sweep the floor once, removing reachable rolls in place.

    Rolls are removed as soon as they are found, so later cells in the
    same sweep already see the emptied positions.
    """
    removed = 0
    for y, row in enumerate(floor):
        for x, cell in enumerate(row):
            if cell == PAPER and is_accessible(floor, x, y):
                row[x] = EMPTY
                removed += 1
    return removed


def solve(lines: Iterable[str]) -> int:
    """Keep sweeping until nothing more can be removed; return the total."""
    floor = [list(line.rstrip("\n")) for line in lines]
    total = 0
    while removed := remove_rolls(floor):
        total += removed
    return total


def run(path: str = "forklift.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the number of rolls."""
    with open(path, encoding="utf-8") as handle:
        total = solve(handle)
    print(f"Finished: Removed {total} rolls")
    return total