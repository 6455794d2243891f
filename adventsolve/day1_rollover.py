"""Combination lock that computes zero passes arithmetically per twist."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from adventsolve.day1 import parse_line


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


@dataclass
class ComboLock:
    """A dial numbered 0-99 that records how often the last twist wrapped."""

    position: int = 50
    rollover: int = 0

    def twist(self, direction: str, distance: int) -> None:
        """Move the dial and record the number of wraps in ``rollover``."""
        if direction == "L":
            target = self.position - distance
            self.rollover = 0 if target >= 0 else abs(target // 100)
        elif direction == "R":
            target = self.position + distance
            self.rollover = _trunc_div(target, 100)
        else:
            raise ValueError("Unknown direction")
        self.position = target % 100


def solve(lines: Iterable[str]) -> int:
    """Count zero stops and wraps for every instruction, starting at 50."""
    lock = ComboLock(50)
    answer = 0
    for line in lines:
        direction, distance = parse_line(line)
        start = lock.position
        lock.twist(direction, distance)
        if lock.position == 0:
            answer += 1
        elif lock.rollover > 0:
            answer += lock.rollover if start != 0 else lock.rollover - 1
    return answer


def run(path: str = "day1_input.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the password."""
    with open(path, encoding="utf-8") as handle:
        password = solve(handle)
    print(f"The password is {password}")
    return password