"""Trash compactor worksheet: columns of vertically written numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

_SLOTS = 4


class ColumnOp(Enum):
    """The operation that combines a column's numbers."""

    ADD = "+"
    MUL = "*"
    NOOP = "noop"


def _empty_slots() -> list[list[str]]:
    return [[] for _ in range(_SLOTS)]


@dataclass
class Column:
    """A worksheet column: its operator, character width and digit slots.

    Each slot collects, top to bottom, the digits found at one character
    offset within the column; a slot read as a whole forms one number.
    """

    op: ColumnOp
    width: int
    digits: list[list[str]] = field(default_factory=_empty_slots)
    ints: list[int] = field(default_factory=list)

    def calculate(self) -> int:
        """Read the numbers from the slots and combine them with the operator."""
        self.ints = [int("".join(slot)) for slot in self.digits if slot]
        if self.op is ColumnOp.ADD:
            return sum(self.ints)
        if self.op is ColumnOp.MUL:
            if not self.ints:
                raise ValueError(f"{self!r} has no numbers to multiply")
            return math.prod(self.ints)
        raise ValueError(f"{self!r} specified NOOP")


def parse_operator_line(line: str) -> list[Column]:
    """Split the operator line into columns, each as wide as its operator and spacing."""
    columns: list[Column] = []
    op = ColumnOp.NOOP
    width = 0
    after_space = False
    for ch in line:
        if ch in "*+":
            if after_space:
                columns.append(Column(op, width))
                width = 0
            op = ColumnOp.MUL if ch == "*" else ColumnOp.ADD
            after_space = False
            width += 1
        elif ch == " ":
            after_space = True
            width += 1
    columns.append(Column(op, width))
    return columns


def fill_columns(columns: Iterable[Column], line: str) -> None:
    """Distribute the digits of one data line into the columns' slots."""
    offset = 0
    for column in columns:
        segment = line[offset : offset + column.width]
        if len(segment) < column.width:
            raise ValueError("data line is shorter than the operator line")
        for slot, ch in enumerate(segment):
            if "0" <= ch <= "9":
                if slot >= _SLOTS:
                    raise ValueError(f"column wider than {_SLOTS} digits")
                column.digits[slot].append(ch)
        offset += column.width


def solve(lines: Iterable[str]) -> int:
    """Sum the results of every column on the worksheet."""
    columns: list[Column] = []
    data: list[str] = []
    for line in lines:
        text = line.rstrip("\n")
        if text.startswith(("*", "+")):
            columns.extend(parse_operator_line(text))
        else:
            data.append(text)
    for text in data:
        fill_columns(columns, text)
    return sum(column.calculate() for column in columns)


def run(path: str = "trash.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the answer."""
    with open(path, encoding="utf-8") as handle:
        answer = solve(handle)
    print(f"Ans {answer}")
    return answer