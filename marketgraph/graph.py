"""Graph value of producers in a marketplace graph.

Graph value is ``W ** xn * x ** (1 - xn) * r`` where ``W`` is the total edge
weight of a node, ``x`` its raw eigenvector centrality, ``xn`` that
centrality normalised to the graph maximum, and ``r`` its reputation. Well
connected nodes are valued by volume, poorly connected ones by connectivity.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_ZERO = 1e-15


def graph_value(total_weight: float, normalized_ec: float, raw_ec: float, reputation: float) -> float:
    """Return ``total_weight ** normalized_ec * raw_ec ** (1 - normalized_ec) * reputation``.

    Any non-positive weight, centrality or reputation gives zero.
    """
    if total_weight <= 0.0 or raw_ec <= 0.0 or reputation <= 0.0:
        return 0.0
    weight_term = total_weight**normalized_ec
    ec_term = raw_ec ** (1.0 - normalized_ec)
    return weight_term * ec_term * reputation


def total_weight(weights: Sequence[Sequence[float]], node: int) -> float:
    """Return the sum of the edge weights in the row of ``node``."""
    if not 0 <= node < len(weights):
        raise IndexError(f"node {node} out of range for {len(weights)} nodes")
    return sum(weights[node], 0.0)


def graph_values(
    weights: Sequence[Sequence[float]],
    ec: Sequence[float],
    normalized_ec: Sequence[float],
    reputations: Sequence[float],
    producer_indices: Iterable[int],
) -> list[tuple[int, float]]:
    """Return ``(index, graph value)`` for each producer, in the given order."""
    return [
        (i, graph_value(total_weight(weights, i), normalized_ec[i], ec[i], reputations[i]))
        for i in producer_indices
    ]


def normalize_graph_values(gvs: Sequence[tuple[int, float]]) -> list[tuple[int, float]]:
    """Scale graph values to shares that sum to 1; all zero if the total is zero."""
    total = sum((gv for _, gv in gvs), 0.0)
    if total < _ZERO:
        return [(i, 0.0) for i, _ in gvs]
    return [(i, gv / total) for i, gv in gvs]


def bare_graph_value_change(
    old_weight: float,
    delta_weight: float,
    old_ec: float,
    delta_ec: float,
    normalized_ec: float,
    old_reputation: float,
    delta_reputation: float,
) -> float:
    """Return the change in graph value caused by the given deltas."""
    old_gv = graph_value(old_weight, normalized_ec, old_ec, old_reputation)
    new_gv = graph_value(
        old_weight + delta_weight,
        normalized_ec,
        old_ec + delta_ec,
        old_reputation + delta_reputation,
    )
    return new_gv - old_gv


def performance_multiplier(delta_g: float, delta_w: float, average_ratio: float) -> float:
    """Return ``max(0, 1 + 2 * (g - avg) / (|g| + |avg|))`` with ``g = delta_g / delta_w``.

    A zero weight change gives 0; a zero denominator gives 1.
    """
    if abs(delta_w) < _ZERO:
        return 0.0
    user_ratio = delta_g / delta_w
    numerator = user_ratio - average_ratio
    denominator = abs(user_ratio) + abs(average_ratio)
    if denominator < _ZERO:
        return 1.0
    return max(1.0 + 2.0 * numerator / denominator, 0.0)