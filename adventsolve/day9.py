"""Movie theatre tiles: largest rectangle with red corners inside the polygon."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import combinations

Point = tuple[int, int]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_RAY_END = 100_000


@dataclass
class Polygon:
    """A rectilinear polygon given by its corners in order."""

    points: list[Point] = field(default_factory=list)
    verticals: list[tuple[Point, Point]] = field(default_factory=list)
    _cache: dict[Point, bool] = field(default_factory=dict, init=False, repr=False)

    def cache_verticals(self) -> None:
        """Collect the vertical edges, each ordered from low to high y."""
        if not self.points:
            raise ValueError("polygon has no points")
        edges = list(zip(self.points, self.points[1:]))
        edges.append((self.points[0], self.points[-1]))
        self.verticals = [
            (p, q) if p[1] < q[1] else (q, p)
            for p, q in edges
            if p[0] == q[0] and p[1] != q[1]
        ]
        self._cache.clear()

    def _contained(self, point: Point) -> bool:
        px, py = point
        intersects = 0
        touches = 0
        for first, second in self.verticals:
            if first[0] < px:
                continue
            low, high = (second, first) if first[1] > second[1] else (first, second)
            if px == high[0] and low[1] <= py <= high[1]:
                return True
            if py in (low[1], high[1]):
                touches += 1
            if px <= low[0] <= _RAY_END and low[1] < py < high[1]:
                intersects += 1
        return intersects % 2 == 1 or touches % 2 == 1

    def contains(self, point: Point) -> bool:
        """True when ``point`` lies inside or on the polygon; results are cached."""
        if point not in self._cache:
            self._cache[point] = self._contained(point)
        return self._cache[point]

    def area(self, a: int, b: int) -> int | None:
        """Area of the rectangle spanned by corners ``a`` and ``b``.

        Returns None when the rectangle leaves the polygon.
        """
        (ax, ay), (bx, by) = self.points[a], self.points[b]
        if ay == by or ax == bx:
            return abs(ay - by) + 1
        x0, x1 = sorted((ax, bx))
        y0, y1 = sorted((ay, by))
        probes = ((x0 + 1, y0), (x1, y0 + 1), (x1 - 1, y1), (x0, y1 - 1))
        if not all(self.contains(probe) for probe in probes):
            return None
        return (x1 - x0 + 1) * (y1 - y0 + 1)


def parse_points(lines: Iterable[str]) -> list[Point]:
    """Read one ``x,y`` corner per line."""
    points: list[Point] = []
    for line in lines:
        parts = line.rstrip("\n").split(",")
        if len(parts) != 2 or not all(_INTEGER.fullmatch(part) for part in parts):
            raise ValueError(f"expected two integers in {line!r}")
        points.append((int(parts[0]), int(parts[1])))
    return points


def solve(lines: Iterable[str]) -> int:
    """Largest valid rectangle area between any two corners."""
    polygon = Polygon(parse_points(lines))
    polygon.cache_verticals()
    areas = (
        polygon.area(i, j) for i, j in combinations(range(len(polygon.points)), 2)
    )
    return max((area for area in areas if area is not None), default=0)


def run(path: str = "movie.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the largest area."""
    with open(path, encoding="utf-8") as handle:
        biggest = solve(handle)
    print(f"Big A: {biggest}")
    return biggest