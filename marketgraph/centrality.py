"""Eigenvector centrality by power iteration on the squared adjacency matrix.

Bipartite graphs make plain power iteration oscillate, because their
adjacency eigenvalues come in +/- pairs. The square of the matrix has only
non-negative eigenvalues, and its dominant eigenvector is the one sought.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = Sequence[Sequence[float]]

_MAX_ITERATIONS = 1000
_ZERO = 1e-15
_TOLERANCE = 1e-10


def _check_square(matrix: Matrix) -> int:
    size = len(matrix)
    for row in matrix:
        if len(row) != size:
            raise ValueError(f"matrix must be square, got a row of length {len(row)} in a {size}-row matrix")
    return size


def square_matrix(matrix: Matrix) -> list[list[float]]:
    """Return the matrix product ``matrix @ matrix``."""
    _check_square(matrix)
    columns = list(zip(*matrix))
    return [
        [sum((a * b for a, b in zip(row, column)), 0.0) for column in columns]
        for row in matrix
    ]


def power_iteration(matrix: Matrix) -> list[float]:
    """Return the eigenvector centrality of every node in ``matrix``.

    ``matrix[i][j]`` is the weight of the edge between nodes ``i`` and ``j``.
    The result is a unit vector (unless the graph has no edges) of absolute
    values.
    """
    squared = square_matrix(matrix)
    x = [1.0] * len(squared)

    for _ in range(_MAX_ITERATIONS):
        x_new = [sum((a * b for a, b in zip(row, x)), 0.0) for row in squared]

        norm = math.sqrt(sum((v * v for v in x_new), 0.0))
        if norm < _ZERO:
            break

        x_new = [v / norm for v in x_new]
        diff = math.sqrt(sum(((a - b) ** 2 for a, b in zip(x, x_new)), 0.0))
        x = x_new

        if diff < _TOLERANCE:
            break

    return [abs(v) for v in x]


def normalize_ec(ec: Sequence[float]) -> list[float]:
    """Scale centrality scores so the largest becomes 1.

    Scores that are all (near) zero are returned unchanged.
    """
    x_max = max(ec, default=0.0)
    x_max = max(x_max, 0.0)
    if x_max < _ZERO:
        return list(ec)
    return [v / x_max for v in ec]