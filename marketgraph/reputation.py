"""Reputation scores updated by peer reviews weighted by graph value.

After a transaction with buyer ``v`` the producer ``u`` gets
``r_u = (N_u * r_u + G_v * r_vu) / (N_u + 1)``, where ``N_u`` is the number of
earlier transactions, ``G_v`` the reviewer's graph value and ``r_vu`` the
rating given.
"""

from __future__ import annotations

R_MIN = 0.1
"""Minimum reputation; positive so that graph values are never zeroed."""

R_MAX = 5.0
"""Maximum reputation."""

_ZERO = 1e-15


def clamp_rating(rating: float) -> float:
    """Clamp a rating into ``[R_MIN, R_MAX]``."""
    return min(max(rating, R_MIN), R_MAX)


def update_reputation(
    current_reputation: float,
    num_transactions: int,
    reviewer_graph_value: float,
    rating: float,
) -> float:
    """Return the reputation after one more review.

    ``num_transactions`` counts the transactions completed before this one.
    """
    if num_transactions < 0:
        raise ValueError(f"num_transactions must be non-negative, got {num_transactions}")
    rating = clamp_rating(rating)
    n = float(num_transactions)
    numerator = n * current_reputation + reviewer_graph_value * rating
    denominator = n + 1.0
    if denominator < _ZERO:
        return current_reputation
    return numerator / denominator


def mutual_update(
    producer_rep: float,
    producer_tx_count: int,
    producer_graph_value: float,
    producer_rates_buyer: float,
    buyer_rep: float,
    buyer_tx_count: int,
    buyer_graph_value: float,
    buyer_rates_producer: float,
) -> tuple[float, float]:
    """Let producer and buyer review each other.

    Returns ``(new_producer_reputation, new_buyer_reputation)``.
    """
    new_producer_rep = update_reputation(
        producer_rep, producer_tx_count, buyer_graph_value, buyer_rates_producer
    )
    new_buyer_rep = update_reputation(
        buyer_rep, buyer_tx_count, producer_graph_value, producer_rates_buyer
    )
    return new_producer_rep, new_buyer_rep