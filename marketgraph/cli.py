"""Demonstration of reputation and graph value evolving over transactions."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from marketgraph.centrality import normalize_ec, power_iteration
from marketgraph.graph import graph_value, total_weight
from marketgraph.reputation import R_MIN, update_reputation

# Peers 0 and 1 carry heavy weights, which gives them high graph values.
ADJACENCY = (
    (0.0, 20.0, 2.0, 0.0, 0.0),
    (20.0, 0.0, 1.5, 3.0, 0.0),
    (2.0, 1.5, 0.0, 0.0, 2.5),
    (0.0, 3.0, 0.0, 0.0, 1.0),
    (0.0, 2.0, 2.5, 1.0, 0.0),
)

PRODUCER = 4

# (buyer, rating) pairs, each buyer rating the producer in turn.
TRANSACTIONS = ((2, 5.0), (3, 5.0), (1, 5.0))


def run_demo() -> str:
    """Run the demonstration and return its report."""
    ec = power_iteration(ADJACENCY)
    norm_ec = normalize_ec(ec)
    reputations = [R_MIN] * len(ADJACENCY)
    tx_counts = [0] * len(ADJACENCY)

    def user_graph_value(user: int) -> float:
        weight = total_weight(ADJACENCY, user)
        return graph_value(weight, norm_ec[user], ec[user], reputations[user])

    lines = [
        "norm ec: [" + ", ".join(f"{v:.6f}" for v in norm_ec) + "]",
        "",
        f"--- User {PRODUCER} initial state ---",
        f"weight: {total_weight(ADJACENCY, PRODUCER):.6f}",
        f"ec: {ec[PRODUCER]:.6f}, norm_ec: {norm_ec[PRODUCER]:.6f}",
        f"reputation: {reputations[PRODUCER]:.6f}",
        f"graph value: {user_graph_value(PRODUCER):.6f}",
    ]

    for number, (buyer, rating) in enumerate(TRANSACTIONS, start=1):
        buyer_gv = user_graph_value(buyer)
        old_rep = reputations[PRODUCER]
        old_gv = user_graph_value(PRODUCER)
        reputations[PRODUCER] = update_reputation(old_rep, tx_counts[PRODUCER], buyer_gv, rating)
        tx_counts[PRODUCER] += 1
        new_rep = reputations[PRODUCER]
        lines += [
            "",
            f"--- Transaction {number}: buyer {buyer} rates producer {PRODUCER} with {rating} ---",
            f"buyer {buyer} graph value: {buyer_gv:.6f}",
            f"reputation: {old_rep:.6f} -> {new_rep:.6f} (\u0394 = {new_rep - old_rep:.6f})",
            f"graph value: {old_gv:.6f} -> {user_graph_value(PRODUCER):.6f}",
        ]

    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration report."""
    parser = argparse.ArgumentParser(
        prog="marketgraph",
        description="Show how peer reviews change a producer's reputation and graph value.",
    )
    parser.parse_args(argv)
    print(run_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())