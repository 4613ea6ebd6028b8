# marketgraph

Scoring tools for a marketplace that is modelled as a weighted transaction graph. The package has three parts.

- **Eigenvector centrality** (`marketgraph.centrality`). `power_iteration` runs power iteration on the squared adjacency matrix, which also converges on bipartite graphs, where plain power iteration oscillates. It returns the absolute values of the resulting unit vector. `normalize_ec` scales the scores so that the most central node scores 1. If every score is zero, the scores are returned unchanged. `square_matrix` returns `matrix @ matrix` and raises `ValueError` for a matrix that is not square.
- **Graph value** (`marketgraph.graph`). `GV = W^x̄ · x^(1-x̄) · r`. Here `W` is a node's total edge weight, `x` is its raw centrality, `x̄` is its normalised centrality and `r` is its reputation. `graph_value` returns 0 when the weight, the centrality or the reputation is not positive.
- **Reputation** (`marketgraph.reputation`). After a transaction the reputation becomes `(N·r + G·rating) / (N + 1)`. In this formula `N` is the number of earlier transactions and `G` is the reviewer's graph value. The rating is first clamped to `R_MIN` (0.1) to `R_MAX` (5.0). A negative transaction count raises `ValueError`.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Library use

```python
from marketgraph.centrality import power_iteration, normalize_ec
from marketgraph.graph import total_weight, graph_value
from marketgraph.reputation import R_MIN, update_reputation

adjacency = [
    [0.0, 20.0, 2.0, 0.0, 0.0],
    [20.0, 0.0, 1.5, 3.0, 0.0],
    [2.0, 1.5, 0.0, 0.0, 2.5],
    [0.0, 3.0, 0.0, 0.0, 1.0],
    [0.0, 2.0, 2.5, 1.0, 0.0],
]

ec = power_iteration(adjacency)
norm = normalize_ec(ec)

buyer, producer = 2, 4
buyer_gv = graph_value(total_weight(adjacency, buyer), norm[buyer], ec[buyer], R_MIN)
new_rep = update_reputation(R_MIN, 0, buyer_gv, 5.0)
```

Other helpers:

- `marketgraph.graph.total_weight` sums a node's row. It raises `IndexError` for a node that is out of range.
- `marketgraph.graph.graph_values` returns `(index, graph value)` pairs for a list of producers.
- `marketgraph.graph.normalize_graph_values` turns those pairs into reward fractions that sum to 1. If the total is zero, every fraction is 0.
- `marketgraph.graph.bare_graph_value_change` gives the change in graph value caused by changes in weight, centrality and reputation.
- `marketgraph.graph.performance_multiplier` gives the multiplier `max(0, 1 + 2·(g − avg) / (|g| + |avg|))`, where `g = ΔG / ΔW`. It returns 0 when `ΔW` is zero and 1 when the denominator is zero.
- `marketgraph.reputation.mutual_update` lets producer and buyer review each other. It returns `(new_producer_reputation, new_buyer_reputation)`.
- `marketgraph.reputation.clamp_rating` limits a rating to the range `R_MIN` to `R_MAX`.

## Command line

```
marketgraph
```

This runs a fixed demonstration on a five-node graph. It prints the normalised centralities and then follows producer 4 through three transactions, each rated 5.0, by buyers 2, 3 and 1. After each transaction it shows the producer's new reputation and graph value. `marketgraph --help` describes the command. It takes no other options.

The same report is available as a string from `marketgraph.cli.run_demo()`.

## What it does not do

The package only computes scores. It does not store a marketplace, its transactions or its reputations. It does not keep track of transaction counts for you. The command cannot read a graph of your own: to score a graph of your own, call the library functions.