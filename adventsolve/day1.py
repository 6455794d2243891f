"""Combination lock that counts every time the dial touches zero."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_NUMBER = re.compile(r"[+-]?[0-9]+")
_I16_MIN = -32768
_I16_MAX = 32767


@dataclass
class ComboLock:
    """A dial numbered 0-99 that scores a point every time it lands on 0."""

    position: int = 50
    points: int = 0

    def twist(self, direction: str, distance: int) -> None:
        """Turn the dial one click at a time, scoring each pass over zero."""
        if direction == "L":
            step = -1
        elif direction == "R":
            step = 1
        else:
            raise ValueError("Direction must be L or R")
        for _ in range(distance):
            self.position = (self.position + step) % 100
            if self.position == 0:
                self.points += 1


def parse_line(line: str) -> tuple[str, int]:
    """Split an instruction such as ``L68`` into its direction and distance."""
    text = line.strip()
    if not text:
        raise ValueError("empty instruction")
    direction, rest = text[0], text[1:]
    if not _NUMBER.fullmatch(rest):
        raise ValueError(f"invalid distance in {text!r}")
    distance = int(rest)
    if not _I16_MIN <= distance <= _I16_MAX:
        raise ValueError(f"distance out of range in {text!r}")
    return direction, distance


def solve(lines: Iterable[str]) -> int:
    """Apply every instruction to a lock starting at 50 and return its points."""
    lock = ComboLock(50)
    for line in lines:
        direction, distance = parse_line(line)
        lock.twist(direction, distance)
    return lock.points


def run(path: str = "day1_input.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the password."""
    with open(path, encoding="utf-8") as handle:
        password = solve(handle)
    print(f"The password is {password}")
    return password