"""Playground: wire junction boxes together, closest pairs first."""

import argparse
import math
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONNECTIONS = 1000
LARGEST_CHAINS = 3


@dataclass(frozen=True)
class Point3D:
    """A junction box position."""

    x: float
    y: float
    z: float

    def distance(self, other: "Point3D") -> float:
        """Return the straight-line distance to other."""
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))


@dataclass(frozen=True)
class Edge:
    """A possible connection between the points at indices i and j."""

    i: int
    j: int
    distance: float


def parse_points(text: str) -> list[Point3D]:
    """Parse one ``x,y,z`` point per non-blank line."""
    points = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) != 3:
            raise ValueError(f"invalid point: {line}")
        x, y, z = (float(value) for value in fields)
        points.append(Point3D(x, y, z))
    return points


def build_edges(points: list[Point3D]) -> list[Edge]:
    """Return every pair of points as an edge, shortest first."""
    edges = [
        Edge(i, j, first.distance(second))
        for i, first in enumerate(points)
        for j, second in enumerate(points[i + 1 :], start=i + 1)
    ]
    edges.sort(key=lambda edge: edge.distance)
    return edges


def find_chains(edges: list[Edge]) -> list[list[int]]:
    """Return the connected groups of point indices joined by the edges."""
    adjacency: dict[int, list[int]] = {}
    for edge in edges:
        adjacency.setdefault(edge.i, []).append(edge.j)
        adjacency.setdefault(edge.j, []).append(edge.i)

    visited: set[int] = set()
    chains = []
    for node in sorted(adjacency):
        if node in visited:
            continue
        visited.add(node)
        stack = [node]
        component = []
        while stack:
            current = stack.pop()
            component.append(current)
            for neighbour in adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        chains.append(component)
    return chains


def part1(edges: list[Edge], connections: int) -> int:
    """Multiply the sizes of the three largest chains after the shortest connections.

    The edges must be sorted shortest first.
    """
    chains = find_chains(edges[:connections])
    if len(chains) < LARGEST_CHAINS:
        raise ValueError(f"need at least {LARGEST_CHAINS} chains, got {len(chains)}")
    sizes = sorted((len(chain) for chain in chains), reverse=True)
    return math.prod(sizes[:LARGEST_CHAINS])


def part2(points: list[Point3D], edges: list[Edge]) -> int:
    """Join chains shortest edge first until one is left.

    Returns the product of the x coordinates of the last pair joined.
    The edges must be sorted shortest first.
    """
    parent = list(range(len(points)))

    def root(index: int) -> int:
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    chains = len(points)
    last_merge = None
    for edge in edges:
        first, second = root(edge.i), root(edge.j)
        if first == second:
            continue
        parent[second] = first
        chains -= 1
        last_merge = edge
        if chains == 1:
            break

    if last_merge is None:
        raise ValueError("no connection joined two chains")

    return int(points[last_merge.i].x * points[last_merge.j].x)


def _read_input(path: str) -> str:
    try:
        text = Path(path).read_text()
    except OSError:
        text = ""
    if not text:
        raise SystemExit(f"unable to read file: {path}")
    return text


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Solve the junction box puzzle.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    parser.add_argument(
        "--connections",
        type=int,
        default=DEFAULT_CONNECTIONS,
        help="number of shortest connections to make for the first answer",
    )
    args = parser.parse_args(argv)

    text = _read_input(args.input)
    try:
        points = parse_points(text)
        edges = build_edges(points)
        first = part1(edges, args.connections)
        second = part2(points, edges)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(first)
    print(second)
    return 0