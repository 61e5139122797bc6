"""Distance-vector routing: every router learns the cheapest path to every other."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from itertools import product
from pathlib import Path
from typing import Iterable, Sequence

INF = 999
"""Cost conventionally used for a missing link."""


@dataclass(frozen=True)
class Route:
    """One routing-table entry; router indices are zero-based."""

    destination: int
    via: int
    distance: int


def compute_routes(costs: Iterable[Iterable[int]]) -> list[list[Route]]:
    """Build each router's table from a square matrix of direct link costs.

    Tables are relaxed repeatedly until no entry changes. A matrix with a
    negative cycle never settles and raises ``ValueError``.
    """
    matrix = [list(row) for row in costs]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("cost matrix must be square")

    dist = [row[:] for row in matrix]
    via = [list(range(n)) for _ in range(n)]

    for _ in range(n + 1):
        changed = False
        for i, j, k in product(range(n), repeat=3):
            candidate = matrix[i][k] + dist[k][j]
            if dist[i][j] > candidate:
                dist[i][j] = candidate
                via[i][j] = k
                changed = True
        if not changed:
            return [
                [Route(j, via[i][j], dist[i][j]) for j in range(n)]
                for i in range(n)
            ]
    raise ValueError("cost matrix contains a negative cycle")


def format_routes(tables: Sequence[Sequence[Route]]) -> str:
    """Render routing tables with one-based router numbers."""
    parts = []
    for router, routes in enumerate(tables, start=1):
        lines = [f"\nRouter {router}:", "Dest\tVia\tDist"]
        lines.extend(
            f"{route.destination + 1}\t{route.via + 1}\t{route.distance}"
            for route in routes
        )
        parts.append("\n".join(lines) + "\n")
    return "".join(parts)


def _parse_matrix(text: str) -> list[list[int]]:
    tokens = text.split()
    if not tokens:
        raise ValueError("missing number of nodes")
    n = int(tokens[0])
    if n < 0:
        raise ValueError("number of nodes must not be negative")
    values = [int(token) for token in tokens[1:]]
    if len(values) < n * n:
        raise ValueError(f"expected {n * n} costs, got {len(values)}")
    return [values[row * n:(row + 1) * n] for row in range(n)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a node count and cost matrix and print every routing table."""
    parser = argparse.ArgumentParser(
        prog="netlab-distance-vector",
        description="Compute distance-vector routing tables from a cost matrix.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="file holding the node count followed by the cost matrix (default: stdin)",
    )
    args = parser.parse_args(argv)

    try:
        text = Path(args.file).read_text() if args.file else sys.stdin.read()
    except OSError as exc:
        parser.error(str(exc))
    try:
        tables = compute_routes(_parse_matrix(text))
    except ValueError as exc:
        parser.error(str(exc))

    print(format_routes(tables), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())