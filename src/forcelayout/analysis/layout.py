"""
Read-only measurements of a layout.

IMPORTANT: Nothing here feeds back into the simulation. These functions
only observe node positions:
- Bounding box and the fit-to-window scale used for display
- Edge lengths and pairwise distances
- Angular gaps between the edges around a node
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np
from scipy.spatial.distance import pdist

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph


@dataclass
class LayoutSummary:
    """Aggregate statistics of a layout at one instant."""

    node_count: int
    edge_count: int
    bounding_box: tuple[float, float, float, float] | None
    mean_edge_length: float
    edge_length_spread: float  # max / min over non-degenerate edges
    min_pairwise_distance: float


def bounding_box(graph: "Graph") -> tuple[float, float, float, float]:
    """
    Axis-aligned bounds of all node positions.

    Returns:
        (min_x, min_y, max_x, max_y)
    """
    if graph.node_count == 0:
        raise ValueError("Bounding box of an empty graph is undefined")

    pos = graph.positions()
    min_x, min_y = pos.min(axis=0)
    max_x, max_y = pos.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def fit_scale(graph: "Graph", width: float, height: float) -> float:
    """
    Scale factor that fits the whole layout into a width x height canvas.

    Only ever shrinks: a layout that already fits gets 1.0.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")
    if graph.node_count == 0:
        return 1.0

    min_x, min_y, max_x, max_y = bounding_box(graph)
    return 1.0 / max((max_x - min_x) / width, (max_y - min_y) / height, 1.0)


def edge_lengths(graph: "Graph") -> np.ndarray:
    """Length of every edge, in edge order. Self-loops have length 0."""
    if graph.edge_count == 0:
        return np.zeros(0, dtype=np.float64)

    pos = graph.positions()
    pairs = np.array(graph.edge_pairs(), dtype=np.int64)
    diff = pos[pairs[:, 0]] - pos[pairs[:, 1]]
    return np.hypot(diff[:, 0], diff[:, 1])


def pairwise_distances(graph: "Graph") -> np.ndarray:
    """Condensed distance vector between all node pairs (scipy pdist order)."""
    if graph.node_count < 2:
        return np.zeros(0, dtype=np.float64)
    return pdist(graph.positions())


def neighbor_angles(graph: "Graph", node_id: int) -> np.ndarray:
    """
    Angular gaps between consecutive edges around a node.

    Neighbors are the node's distinct neighbors, sorted by direction.
    The gaps sum to 2π. Neighbors sitting exactly on the node are ignored.

    Returns:
        Gaps in radians, sorted ascending (empty if fewer than 2 neighbors)
    """
    center = graph.node(node_id).pos
    directions = []
    for other in graph.distinct_neighbors(node_id):
        d = graph.node(other).pos - center
        if np.any(d):
            directions.append(math.atan2(d[1], d[0]))

    if len(directions) < 2:
        return np.zeros(0, dtype=np.float64)

    directions = np.sort(np.array(directions))
    gaps = np.diff(np.append(directions, directions[0] + 2 * math.pi))
    return np.sort(gaps)


def layout_summary(graph: "Graph") -> LayoutSummary:
    """Collect the main layout statistics in one pass."""
    lengths = edge_lengths(graph)
    real = lengths[lengths > 0]
    distances = pairwise_distances(graph)

    if len(real) > 0:
        mean_length = float(real.mean())
        spread = float(real.max() / real.min())
    else:
        mean_length = 0.0
        spread = 1.0

    return LayoutSummary(
        node_count=graph.node_count,
        edge_count=graph.edge_count,
        bounding_box=bounding_box(graph) if graph.node_count else None,
        mean_edge_length=mean_length,
        edge_length_spread=spread,
        min_pairwise_distance=float(distances.min()) if len(distances) else 0.0,
    )
