"""Junction boxes: join the closest pairs until one circuit remains."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import combinations

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


@dataclass(frozen=True)
class Node:
    """A junction box at integer coordinates in space."""

    x: int
    y: int
    z: int

    def distance(self, other: Node) -> float:
        """Straight-line distance between two boxes."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(float(dx * dx + dy * dy + dz * dz))

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"


@dataclass
class Graph:
    """A list of circuits, each a set of connected boxes."""

    circuits: list[set[Node]] = field(default_factory=list)

    def insert(self, node: Node) -> None:
        """Add a circuit holding only ``node``."""
        self.circuits.append({node})

    def connect(self, a: Node, b: Node) -> bool:
        """Join the circuits of ``a`` and ``b``, creating or extending as needed."""
        ci: int | None = None
        cj: int | None = None
        for index, circuit in enumerate(self.circuits):
            if a in circuit:
                ci = index
            if b in circuit:
                cj = index

        if ci is not None and cj is not None:
            if ci == cj:
                return True
            removed_at, kept_at = min(ci, cj), max(ci, cj) - 1
            removed = self.circuits.pop(removed_at)
            self.circuits[kept_at] = self.circuits[kept_at] | removed
        elif ci is not None:
            self.circuits[ci].add(b)
        elif cj is not None:
            self.circuits[cj].add(a)
        else:
            self.circuits.append({a, b})
        return True


def parse_nodes(lines: Iterable[str]) -> list[Node]:
    """Read one ``x,y,z`` box per line."""
    nodes: list[Node] = []
    for line in lines:
        parts = line.rstrip("\n").split(",")
        if len(parts) != 3:
            raise ValueError(f"expected three coordinates in {line!r}")
        x, y, z = (_parse_int(part) for part in parts)
        nodes.append(Node(x, y, z))
    return nodes


def _closing_pair(nodes: list[Node]) -> tuple[Node, Node] | None:
    graph = Graph()
    for node in nodes:
        graph.insert(node)
    distances = {(a, b): a.distance(b) for a, b in combinations(nodes, 2)}
    for (a, b), _ in sorted(distances.items(), key=lambda item: item[1]):
        graph.connect(a, b)
        if len(graph.circuits) == 1:
            return a, b
    return None


def solve(lines: Iterable[str]) -> int | None:
    """Product of the x coordinates of the pair that closes the last circuit.

    Returns None when no connection ever leaves a single circuit.
    """
    pair = _closing_pair(parse_nodes(lines))
    if pair is None:
        return None
    a, b = pair
    return a.x * b.x


def run(path: str = "junction.txt") -> int | None:
    """Solve the puzzle stored in ``path`` and print the closing pair."""
    with open(path, encoding="utf-8") as handle:
        nodes = parse_nodes(handle)
    pair = _closing_pair(nodes)
    if pair is None:
        print("No single circuit could be formed")
        return None
    a, b = pair
    answer = a.x * b.x
    print(f"The coordinates: {a}:{b} : {answer}")
    return answer