"""
Experiment harness: graphs to lay out.

Pre-built inputs for:
- Random graphs from node/edge counts (every node connected once E >= N)
- Cycles placed on a jittered circle
"""

from forcelayout.experiments.graphs import random_edges, random_graph, cycle_graph

__all__ = [
    "random_edges",
    "random_graph",
    "cycle_graph",
]
