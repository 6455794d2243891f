"""Gift shop product ids: find ids made of a repeated digit pattern."""

from __future__ import annotations

from dataclasses import dataclass

_SEPARATORS = ",\0\n"


@dataclass
class DigitString:
    """A non-negative integer kept as its decimal digits, leading zeros included."""

    digits: str

    def __post_init__(self) -> None:
        if not self.digits or not all("0" <= ch <= "9" for ch in self.digits):
            raise ValueError(f"not a digit string: {self.digits!r}")

    def __int__(self) -> int:
        return int(self.digits)

    def __str__(self) -> str:
        return self.digits

    def increment(self) -> None:
        """Add one, growing by a digit when every digit is 9."""
        end = len(self.digits)
        while end > 0 and self.digits[end - 1] == "9":
            end -= 1
        tail = "0" * (len(self.digits) - end)
        if end == 0:
            self.digits = "1" + tail
        else:
            bumped = chr(ord(self.digits[end - 1]) + 1)
            self.digits = self.digits[: end - 1] + bumped + tail

    def invalid_one(self) -> bool:
        """True when the digits are one sequence written exactly twice."""
        length = len(self.digits)
        if length % 2:
            return False
        half = length // 2
        return self.digits[:half] == self.digits[half:]

    def invalid_two(self) -> bool:
        """True when the digits are one sequence repeated at least twice."""
        length = len(self.digits)
        if length == 1:
            return False
        sizes = [1, *(size for size in range(2, length) if length % size == 0)]
        return any(
            self.digits == self.digits[:size] * (length // size) for size in sizes
        )


def parse_ranges(text: str) -> list[tuple[DigitString, DigitString]]:
    """Read ``start-stop`` ranges from the first line of ``text``.

    A range is only recorded when a separator (comma, NUL or newline)
    follows it.
    """
    first_line, newline, _ = text.partition("\n")
    ranges: list[tuple[DigitString, DigitString]] = []
    start: list[str] = []
    stop: list[str] = []
    capture_start = True
    for ch in first_line + newline:
        if ch == "-":
            capture_start = False
        elif ch in _SEPARATORS:
            capture_start = True
            ranges.append((DigitString("".join(start)), DigitString("".join(stop))))
            start.clear()
            stop.clear()
        elif capture_start:
            start.append(ch)
        else:
            stop.append(ch)
    return ranges


def solve(text: str) -> int:
    """Sum every id in the ranges whose digits are a repeated pattern."""
    total = 0
    for start, stop in parse_ranges(text):
        current = DigitString(start.digits)
        limit = int(stop)
        while int(current) <= limit:
            if current.invalid_two():
                total += int(current)
            current.increment()
    return total


def run(path: str = "gift_shop.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the password."""
    with open(path, encoding="utf-8") as handle:
        password = solve(handle.read())
    print(f"The password is {password}")
    return password