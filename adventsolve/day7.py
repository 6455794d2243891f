"""Tachyon manifold: count the timelines a split beam can follow."""

from __future__ import annotations


def count_timelines(text: str) -> int:
    """Count the beam paths that leave the last complete row of ``text``.

    The beam starts at ``S`` and every ``^`` splits it to the left and the
    right. Only rows terminated by a newline contribute to the count.
    """
    above: list[int] = []
    current: list[int] = []
    previous = "."
    index = 0
    try:
        for ch in text:
            if previous != "^":
                current.append(0)
            if ch == ".":
                if previous == "^":
                    current.append(above[index - 1])
                    current[index] = above[index] + above[index - 1]
                else:
                    current[index] = above[index] if index < len(above) else 0
            elif ch == "^":
                if index == 0:
                    raise ValueError("a splitter cannot start a row")
                current[index - 1] += above[index]
                current[index] = 0
            elif ch == "S":
                current[index] = 1
            if ch == "\n":
                above = current
                current = []
                index = 0
            else:
                index += 1
            previous = ch
    except IndexError as exc:
        raise ValueError("malformed manifold") from exc
    return sum(above)


def run(path: str = "beam.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the number of timelines."""
    with open(path, encoding="utf-8") as handle:
        timelines = count_timelines(handle.read())
    print(f"There are {timelines} timelines")
    return timelines