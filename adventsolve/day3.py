"""Battery banks: pick the twelve cells giving the highest joltage."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_PICKS = 12


@dataclass
class Battery:
    """A row of digit cells; ``jolts`` is set once the battery is tested."""

    cells: str
    jolts: int = 0
    tested: bool = False

    def joltage(self) -> int:
        """Pick twelve cells in order that form the largest number."""
        if len(self.cells) < _PICKS - 1:
            raise ValueError("a battery needs at least 11 cells")
        picked: list[str] = []
        index = 0
        offset = 0
        for pick in range(_PICKS):
            best = "0"
            end = len(self.cells) - (_PICKS - 1 - pick)
            for position in range(index + offset, end):
                if self.cells[position] > best:
                    best = self.cells[position]
                    index = position
            picked.append(best)
            offset = 1
        self.jolts = int("".join(picked))
        self.tested = True
        return self.jolts


def solve(lines: Iterable[str]) -> int:
    """Sum the joltage of every battery, one battery per line."""
    return sum(Battery(line.rstrip("\n")).joltage() for line in lines)


def run(path: str = "battery.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the bank capacity."""
    with open(path, encoding="utf-8") as handle:
        capacity = solve(handle)
    print(f"Bank capacity: {capacity}")
    return capacity