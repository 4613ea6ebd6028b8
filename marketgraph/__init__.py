"""Eigenvector centrality, graph value and reputation scoring for marketplace graphs, with a demonstration command."""

__version__ = "0.1.0"