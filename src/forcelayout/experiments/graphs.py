"""
Graph generators for demos and tests.

random_edges follows a two-phase policy:
1. Node i is joined to a random node, for i < min(N, E). With E >= N
   every node ends up with degree >= 1.
2. The remaining E - N edges join random pairs.

Self-loops and duplicate edges can come out of both phases. They are kept:
the simulation handles them.
"""

from __future__ import annotations
import math

import numpy as np

from forcelayout.core.graph import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    Graph,
    check_count,
    build_graph,
)


def random_edges(
    node_count: int,
    edge_count: int,
    rng: np.random.Generator | None = None,
) -> list[tuple[int, int]]:
    """
    Random endpoint pairs for edge_count edges over node_count nodes.

    Args:
        node_count: Number of nodes (ids 0..node_count-1)
        edge_count: Number of edges to generate
        rng: Random generator (a fresh one if None)

    Returns:
        List of (id_a, id_b) pairs
    """
    node_count = check_count(node_count, "node_count")
    edge_count = check_count(edge_count, "edge_count")
    if node_count == 0:
        if edge_count:
            raise ValueError("Cannot place edges in a graph with no nodes")
        return []
    if rng is None:
        rng = np.random.default_rng()

    edges = []
    for a in range(min(node_count, edge_count)):
        edges.append((a, int(rng.integers(node_count))))

    for _ in range(edge_count - node_count):
        a, b = rng.integers(node_count, size=2)
        edges.append((int(a), int(b)))

    return edges


def random_graph(
    node_count: int,
    edge_count: int,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    rng: np.random.Generator | None = None,
) -> Graph:
    """
    Nodes scattered uniformly over a width x height canvas, joined by
    random_edges.
    """
    if rng is None:
        rng = np.random.default_rng()
    edges = random_edges(node_count, edge_count, rng)
    return build_graph(node_count, edges, width=width, height=height, rng=rng)


def cycle_graph(
    node_count: int,
    radius: float = 50.0,
    center: tuple[float, float] = (0.0, 0.0),
    jitter: float = 0.0,
    rng: np.random.Generator | None = None,
) -> Graph:
    """
    A cycle 0-1-2-...-(n-1)-0 placed evenly on a circle.

    Args:
        node_count: Number of nodes, at least 3 for a proper cycle
        radius: Circle radius
        center: Circle center
        jitter: Std. deviation of Gaussian noise added to each position
        rng: Random generator for the jitter

    Returns:
        The cycle graph
    """
    node_count = check_count(node_count, "node_count")
    if node_count < 3:
        raise ValueError(f"A cycle needs at least 3 nodes, got {node_count}")

    angles = 2 * math.pi * np.arange(node_count) / node_count
    positions = np.column_stack([
        center[0] + radius * np.cos(angles),
        center[1] + radius * np.sin(angles),
    ])
    if jitter > 0:
        if rng is None:
            rng = np.random.default_rng()
        positions += rng.normal(0.0, jitter, size=positions.shape)

    edges = [(i, (i + 1) % node_count) for i in range(node_count)]
    return build_graph(node_count, edges, positions=positions)
