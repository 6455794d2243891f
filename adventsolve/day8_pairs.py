"""Junction boxes: connect the closest pairs and size the largest circuits."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import combinations

from adventsolve.day8 import parse_nodes

_LARGEST = 3


@dataclass
class Graph:
    """Circuits of box indices, kept in connection order."""

    circuits: list[list[int]] = field(default_factory=list)

    def connect(self, i: int, j: int) -> None:
        """Join the circuits holding ``i`` and ``j``."""
        ci: int | None = None
        cj: int | None = None
        for index, circuit in enumerate(self.circuits):
            if i in circuit:
                ci = index
            if j in circuit:
                cj = index
        if ci is not None and ci == cj:
            cj = None

        if ci is not None and cj is not None:
            last = len(self.circuits) - 1
            absorbed = self.circuits[cj]
            self.circuits[cj] = self.circuits[last]
            self.circuits.pop()
            # The kept circuit may have been the one moved into the gap.
            target = cj if ci == last else ci
            self.circuits[target].extend(absorbed)
        elif ci is not None:
            if j not in self.circuits[ci]:
                self.circuits[ci].append(j)
        elif cj is not None:
            if i not in self.circuits[cj]:
                self.circuits[cj].append(i)
        else:
            self.circuits.append([i, j])


def solve(lines: Iterable[str], connections: int = 10) -> int:
    """Connect the closest pairs, then multiply the sizes of the three largest circuits."""
    nodes = parse_nodes(lines)
    pairs = sorted(
        combinations(range(len(nodes)), 2),
        key=lambda pair: nodes[pair[0]].distance(nodes[pair[1]]),
    )
    if len(pairs) < connections:
        raise ValueError(f"only {len(pairs)} pairs for {connections} connections")
    graph = Graph()
    for i, j in pairs[:connections]:
        graph.connect(i, j)
    sizes = sorted((len(circuit) for circuit in graph.circuits), reverse=True)
    if len(sizes) < _LARGEST:
        raise ValueError(f"only {len(sizes)} circuits were formed")
    return math.prod(sizes[:_LARGEST])


def run(path: str = "junction.txt") -> int:
    """Solve the puzzle stored in ``path`` and print the answer."""
    with open(path, encoding="utf-8") as handle:
        answer = solve(handle)
    print(answer)
    return answer