"""Cafeteria inventory: fresh ingredient id ranges and their union."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_U64 = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1


def _parse_u64(text: str) -> int:
    if not _U64.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"integer too large: {text!r}")
    return value


@dataclass(frozen=True)
class FreshIngredientRange:
    """An inclusive range of fresh ingredient ids."""

    start: int
    stop: int

    def is_fresh(self, ident: int) -> bool:
        """True when ``ident`` lies within the range."""
        return self.start <= ident <= self.stop

    def num_fresh(self) -> int:
        """Number of ids covered by the range."""
        if self.stop + 1 < self.start:
            raise ValueError(f"range {self.start}-{self.stop} is reversed")
        return self.stop - self.start + 1

    def union(self, other: FreshIngredientRange) -> FreshIngredientRange:
        """The smallest range covering both ranges."""
        return FreshIngredientRange(
            min(self.start, other.start), max(self.stop, other.stop)
        )

    def overlaps(self, other: FreshIngredientRange) -> bool:
        """True when the ranges share at least one id."""
        return (
            other.start <= self.start <= other.stop
            or other.start <= self.stop <= other.stop
            or self.start <= other.start <= self.stop
            or self.start <= other.stop <= self.stop
        )


def _first_overlap(
    ranges: list[FreshIngredientRange],
) -> tuple[int, int] | None:
    for i, first in enumerate(ranges):
        for j, second in enumerate(ranges):
            if i != j and first.overlaps(second):
                return i, j
    return None


def merge_ranges(
    ranges: Iterable[FreshIngredientRange],
) -> list[FreshIngredientRange]:
    """Union overlapping ranges until no two of them overlap."""
    merged = list(ranges)
    while (pair := _first_overlap(merged)) is not None:
        i, j = pair
        first = merged.pop(i)
        # The partner always follows the first range, so it moved down by one.
        slot = j - 1
        second = merged[slot]
        last = merged.pop()
        if slot < len(merged):
            merged[slot] = last
        merged.append(first.union(second))
    return merged


def parse_inventory(
    lines: Iterable[str],
) -> tuple[list[FreshIngredientRange], list[int]]:
    """Read ``start-stop`` ranges, a blank line, then one ingredient id per line."""
    ranges: list[FreshIngredientRange] = []
    ingredients: list[int] = []
    reading_ranges = True
    for line in lines:
        text = line.rstrip("\n")
        if not text:
            reading_ranges = False
            continue
        if reading_ranges:
            first, dash, rest = text.partition("-")
            if not dash:
                raise ValueError(f"missing '-' in range {text!r}")
            ranges.append(
                FreshIngredientRange(
                    _parse_u64(first), _parse_u64(rest.replace("-", ""))
                )
            )
        else:
            ingredients.append(_parse_u64(text))
    return ranges, ingredients


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return the number of fresh ingredients and the number of fresh ids."""
    ranges, ingredients = parse_inventory(lines)
    merged = merge_ranges(ranges)
    fresh = sum(
        1 for ident in ingredients if any(r.is_fresh(ident) for r in merged)
    )
    fresh_ids = sum(r.num_fresh() for r in merged)
    return fresh, fresh_ids


def run(path: str = "cafe.txt") -> tuple[int, int]:
    """Solve the puzzle stored in ``path`` and print both counts."""
    with open(path, encoding="utf-8") as handle:
        fresh, fresh_ids = solve(handle)
    print(f"There are {fresh} fresh ing")
    print(f"There are {fresh_ids} fresh ids")
    return fresh, fresh_ids